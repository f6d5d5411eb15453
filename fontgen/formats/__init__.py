"""Atlas file formats: .bmfa container and plain-text metadata."""
