"""Binary codec and hex argument serializer for smart contract values."""

__version__ = "0.1.0"