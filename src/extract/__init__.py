"""Payload extraction.

This package writes store payloads to disk and summarizes each run.
"""
