"""Core constants, color table and exceptions for GridTint."""
