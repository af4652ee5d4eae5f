"""serializers subpackage: value-level writers for each conversion target.

Every writer takes an already-parsed JSON value and returns a fresh string.
Parsing and error reporting live one layer up, in ``json_export.exporter``.

Example::

    from json_export.serializers import write_csv

    write_csv([{"a": 1, "b": 2}, {"a": 3}])
    # '"a","b"\\n"1","2"\\n"3",""'
"""

from __future__ import annotations

from json_export.serializers.csv_writer import write_csv
from json_export.serializers.json_writer import write_json, write_minified_json
from json_export.serializers.xml_writer import write_xml
from json_export.serializers.yaml_writer import write_yaml

__all__ = ["write_csv", "write_json", "write_minified_json", "write_xml", "write_yaml"]
