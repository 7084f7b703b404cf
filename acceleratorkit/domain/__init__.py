"""Domain layer for the accelerator kit processor.

This layer holds the data dictionary model and the parsing and synthesis
logic. It is independent of spreadsheet libraries, encoders and the CLI.
"""
