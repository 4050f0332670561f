"""Readers for .NET project files."""
