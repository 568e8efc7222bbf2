"""Student registry HTTP service.

This package exposes the storage backends, validator, response envelope
and FastAPI route table used by the application. Individual modules
contain the concrete implementations and documentation.
"""
