"""Personal CRM API: contacts, interactions, notes, reminders, tags and global search."""
