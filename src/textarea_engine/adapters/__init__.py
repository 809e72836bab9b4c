"""Host adapters that connect the engine to terminal UI frameworks."""
