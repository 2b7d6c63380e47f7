"""
Acoustic Bands - fractional-octave band mapping and spectrum conditioning.

Maps frequencies to octave ranges and center frequencies, smooths
narrow-band spectra to 1/3- and 1/6-octave resolution, and conditions
phase data for charting.
"""

__version__ = "1.0.0"
