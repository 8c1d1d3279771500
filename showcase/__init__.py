"""Project-showcase backend: users, project submissions, moderation and comments."""
