"""golessons - scaffold courses, chapters and lessons in a Go learning repository."""
