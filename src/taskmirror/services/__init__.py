"""Services for taskmirror: configuration, composition root and task logic."""
