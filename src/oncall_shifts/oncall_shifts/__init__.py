"""On-call Shifts package.

Computes the active on-call shift and the time until the next one from a
sorted list of shift time-ranges, with a thin Flask JSON layer on top of the
service/repository layers.
"""
