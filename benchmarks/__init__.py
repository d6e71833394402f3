"""
Benchmark suite for jsonvalue rendering performance.

Compares JSONObject.to_text against the dumps functions of:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)
"""
