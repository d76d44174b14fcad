"""
Application layer.

Use cases load aggregates through repository protocols, call the domain,
persist the outcome and publish the domain events the aggregates record.
"""
