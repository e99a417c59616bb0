"""TrackerBot: a single-user console task tracker (todos, deadlines, events)."""
