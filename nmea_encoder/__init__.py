"""
nmea-encoder: build NMEA 0183 sentences from navigation and weather data.

Covers position/course (RMC), wind (MWV, VWT, MWD), atmosphere (MMB, MTA,
MDA), transducers (XDR), heading and water speed (VHW, HDM) and current
(VDR). Every sentence carries its XOR checksum; transport is left to the
caller.
"""

__version__ = "0.1.0"
