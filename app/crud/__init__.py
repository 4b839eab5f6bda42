"""Store queries for users and posts, with offset pagination."""
