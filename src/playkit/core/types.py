"""Core type definitions for playkit."""

type Copy[T] = T
"""Type alias indicating a value is an independent deep copy.

When you see `Copy[T]` in a return type, mutating the returned value never
affects the record it was copied from.
"""
