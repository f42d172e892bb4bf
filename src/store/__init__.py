"""Assembly store decoding layer.

This package decodes the container header and record tables and
locates payload bytes inside a fully buffered store.
"""
