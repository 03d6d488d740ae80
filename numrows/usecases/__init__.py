"""Use cases wrapping view-model commands with user-presentable errors."""
