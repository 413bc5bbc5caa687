"""TeamDesk — role-based employee task and leave management API."""
