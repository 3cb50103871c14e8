"""
Order samples. All of them run against the sandbox endpoint.
"""
