"""Block sync, commitments, consensus and header bridging for the COLD L3 chain."""

__version__ = "0.1.0"