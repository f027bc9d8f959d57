"""Decoding of raw rates documents into snapshot entries."""
