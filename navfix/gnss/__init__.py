"""GNSS module for streaming decoded RMC fixes from gpsd or NMEA logs."""

from navfix.gnss.reader import RMCReader, decode_rmc_line, iter_rmc

__all__ = ["RMCReader", "decode_rmc_line", "iter_rmc"]
