"""Feature packages for wslgit."""
