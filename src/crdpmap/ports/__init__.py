from .schema import SchemaProvider, OutputSink

__all__ = ["SchemaProvider", "OutputSink"]
