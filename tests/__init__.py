"""Tests for fallible."""
