"""wakelan: send Wake-on-LAN magic packets across local networks."""

__version__ = "1.0.0"
