"""Shared utilities: logging, exit codes and console output."""
