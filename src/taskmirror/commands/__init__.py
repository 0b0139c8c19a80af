"""Command-line commands for taskmirror."""
