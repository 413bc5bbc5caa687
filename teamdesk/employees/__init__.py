"""Employees module — admin directory and department statistics."""
