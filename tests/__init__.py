"""Shared data for url_builder's unit tests."""

EXAMPLE_HOSTNAME = "http://www.example.com"
EXAMPLE_URL = (
    "http://www.example.com/resource/nested_resource?parameter1=12&parameter2=34"
)

PRESETS_TOML = """
[presets.example]
hostname = "http://www.example.com"
resources = ["resource", "nested_resource"]
parameters = [["parameter1", "12"], ["parameter2", "34"]]

[presets.bare]
hostname = "http://example.com"

[presets.table]
hostname = "http://example.com"
resources = ["api", "v2"]
parameters = {page = 3, sort = "asc"}
"""
