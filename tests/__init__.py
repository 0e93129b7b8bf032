"""Test suite for the filevault package."""
