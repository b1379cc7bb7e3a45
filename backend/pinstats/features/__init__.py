"""Feature modules: provider stats, identity, opponent history and the dashboard."""
