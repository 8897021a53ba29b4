"""
Desktop client for the dice duel.
"""
