"""3GPP research guidance server"""

__version__ = "2.0.0"
