# src/crdpmap/config/const.py
from __future__ import annotations

# Input schema: root client declaration and per-domain naming conventions.
ROOT_CLIENT_NAME: str = "CrdpClient"
EVENTS_SUFFIX: str = "Client"
COMMANDS_SUFFIX: str = "Commands"
PROMISE_WRAPPER: str = "Promise"
VOID: str = "void"

# Output file layout.
OUTPUT_EVENTS_NAME: str = "CrdpEvents"
OUTPUT_COMMANDS_NAME: str = "CrdpCommands"
OUTPUT_TYPE_NAMESPACE: str = "Crdp"
OUTPUT_GLOBAL_MODULE: str = "LH"
INDENT: str = "  "

DEFAULT_SCHEMA_PATH: str = "node_modules/vscode-chrome-debug-core/lib/crdp/crdp.d.ts"
DEFAULT_OUTPUT_PATH: str = "typings/crdp-mapping.d.ts"

COMPLETION_MESSAGE: str = "crdp mappings generated"

# fmt: off
HEADER_BLOCK: str = (
    "/**\n"
    " * @license Copyright 2018 Google Inc. All Rights Reserved.\n"
    " * Licensed under the Apache License, Version 2.0 (the \"License\"); you may not use this file except in compliance with the License. You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0\n"
    " * Unless required by applicable law or agreed to in writing, software distributed under the License is distributed on an \"AS IS\" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the License for the specific language governing permissions and limitations under the License.\n"
    " */\n"
    "\n"
    "// Generated by `crdpmap generate`\n"
)
# fmt: on
