"""
Deploy parameterized smart contracts to EVM networks and report their addresses.
"""

__version__ = "0.1.0"
