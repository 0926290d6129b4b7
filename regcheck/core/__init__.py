"""Core infrastructure: exceptions, record frame schema and the file reader."""
