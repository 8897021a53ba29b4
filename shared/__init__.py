"""
Constants and enumerations shared by the engine and the client.
"""
