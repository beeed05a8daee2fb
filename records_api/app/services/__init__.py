"""
Service layer.

``records`` and ``query_filter`` hold the storage-agnostic helpers that
locate, mutate and search records in a loaded collection.
``RecordService`` ties them to the document store; each resource
subclasses it with its document name and schema.
"""
