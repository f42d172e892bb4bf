"""Input loading.

This package resolves blob files in an input directory and reads the
assembly manifest that names their payloads.
"""
