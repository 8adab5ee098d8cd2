"""导出 FastAPI OpenAPI schema 到 docs/openapi.json

用法：python scripts/export_openapi.py

每次 API schema 变更后运行，客户端据此重新生成类型。
"""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from api.main import app

output_path = os.path.join(os.path.dirname(__file__), "..", "docs", "openapi.json")
os.makedirs(os.path.dirname(output_path), exist_ok=True)

with open(output_path, "w") as f:
    json.dump(app.openapi(), f, indent=2)

print(f"OpenAPI schema exported to {output_path}")
