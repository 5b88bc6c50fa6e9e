"""Engine code: path guard, note parsing and the document mutation operations."""
