"""
Discovery document -> Python bindings.

Google describes its REST APIs with discovery documents
(https://developers.google.com/discovery/v1/reference/apis), JSON listing the
schemas, resources and methods of an API.  generate() turns one into a module
of ApiResource dataclasses, ApiCall subclasses and ResourceService facades,
which is how the modules under gapirest.genomics and gapirest.mapsengine were
produced.

    gapirest-generate https://www.googleapis.com/discovery/v1/apis/genomics/v1beta2/rest -o v1beta2.py
"""
import argparse
import json
import keyword
import logging
import re
import sys
import textwrap
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

# parameters every method accepts, handled by ApiCall/RequestBuilder or the transport
STANDARD_PARAMETERS = {"alt", "fields", "key", "oauth_token", "prettyPrint", "quotaUser", "userIp"}
# ApiCall attributes a generated setter must not shadow
_RESERVED_CALL_NAMES = {"method", "path", "response", "upload", "fields", "media", "request", "execute"}
# ApiService and ResourceService members a resource attribute or factory must not shadow
_RESERVED_SERVICE_NAMES = {"http", "base_url", "user_agent", "timeout", "config", "service", "BASE_URL"}

_DOC_WIDTH = 72


def _cap(name: str) -> str:
    return name[:1].upper() + name[1:]


def _lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def _identifier(name: str, reserved: set[str] = set()) -> str:
    ident = re.sub(r"\W", "_", name)
    if keyword.iskeyword(ident) or ident in reserved:
        ident += "_"
    return ident


def scope_constant(url: str) -> str:
    """https://www.googleapis.com/auth/genomics.readonly -> GENOMICS_READONLY_SCOPE"""
    tail = url.rstrip("/").rsplit("/", 1)[-1]
    return re.sub(r"[^A-Za-z0-9]+", "_", tail).upper() + "_SCOPE"


def _doc_text(text: str) -> str:
    """Text that can sit inside a triple quoted string as it reads"""
    return str(text).replace("\\", "\\\\").replace('"""', "'''")


def docstring(text: str|None, indent: str) -> list[str]:
    """Docstring lines, single line when it fits, otherwise wrapped"""
    if not text:
        return []
    text = " ".join(_doc_text(text).split())
    if text.endswith('"'):
        text += " "
    if len(text) <= _DOC_WIDTH:
        return [f'{indent}"""{text}"""']
    lines = [f'{indent}"""']
    lines += [f"{indent}{line}" for line in textwrap.wrap(text, _DOC_WIDTH)]
    lines.append(f'{indent}"""')
    return lines


class ModuleGenerator():
    """
    Holds the discovery document while emitting.  Keeps track of which
    imports the emitted code actually needs.
    """

    def __init__(self, document: dict) -> None:
        if not isinstance(document, dict) or "name" not in document:
            raise ValueError("not a discovery document")
        self.doc = document
        self.schemas = dict(document.get("schemas", {}))
        self.uses = set()
        self.service_names = set()
        # variant schema name -> (union base, tag)
        self.variants = {}
        for name, schema in self.schemas.items():
            variant = schema.get("variant", None)
            if variant:
                for entry in variant.get("map", []):
                    self.variants.setdefault(entry["$ref"], (name, entry["type_value"]))

    @property
    def base_url(self) -> str:
        if "rootUrl" in self.doc:
            return self.doc["rootUrl"] + self.doc.get("servicePath", "")
        return self.doc.get("baseUrl", "")

    def type_hint(self, prop: dict) -> tuple[str, bool]:
        """(python type hint, is a string encoded 64 bit int) for a schema or parameter"""
        if "$ref" in prop:
            return prop["$ref"], False
        t = prop.get("type", "any")
        if t == "string":
            if prop.get("format", "") in ("int64", "uint64"):
                return "int", True
            return "str", False
        if t == "integer":
            return "int", False
        if t == "number":
            return "float", False
        if t == "boolean":
            return "bool", False
        if t == "array":
            item, int64 = self.type_hint(prop.get("items", {}))
            self.uses.add("List")
            return f"List[{item}]", int64
        if t == "object" and isinstance(prop.get("additionalProperties", None), dict):
            item, int64 = self.type_hint(prop["additionalProperties"])
            return f"dict[str, {item}]", int64
        if t == "object":
            return "dict", False
        self.uses.add("Any")
        return "Any", False

    def emit_field(self, name: str, prop: dict) -> str:
        hint, int64 = self.type_hint(prop)
        ident = _identifier(name)
        if ident != name:
            meta = {"name": name}
            if int64:
                meta["format"] = "int64"
            return f"    {ident}: {hint}|None = field(default=None, metadata={meta!r})"
        if int64:
            self.uses.add("INT64")
            return f"    {name}: {hint}|None = field(default=None, metadata=INT64)"
        return f"    {name}: {hint}|None = field(default=None)"

    def emit_schema(self, name: str, schema: dict) -> list[str]:
        if "variant" in schema:
            self.uses.add("TaggedUnion")
            discriminant = schema["variant"].get("discriminant", "type")
            lines = [f'class {name}(TaggedUnion, discriminant="{discriminant}"):']
            lines += docstring(schema.get("description"), "    ") or ["    pass"]
            return lines
        if self._is_alias(schema):
            hint, _ = self.type_hint(schema)
            return [f"{name} = {hint}"]

        self.uses.update(("ApiResource", "dataclass"))
        skip = None
        if name in self.variants:
            base, tag = self.variants[name]
            skip = self.schemas[base]["variant"].get("discriminant", "type")
            header = f'class {name}({base}, tag="{tag}"):'
        else:
            header = f"class {name}(ApiResource):"
        lines = ["@dataclass", header]
        lines += docstring(schema.get("description"), "    ")
        body = [self.emit_field(p, prop) for p, prop in sorted(schema.get("properties", {}).items()) if p != skip]
        if not body and not schema.get("description"):
            body = ["    pass"]
        return lines + body

    def _is_alias(self, schema: dict) -> bool:
        return "variant" not in schema and (schema.get("type", "object") != "object" or (
            "additionalProperties" in schema and "properties" not in schema))

    def schema_order(self) -> list[str]:
        """
        Union bases first so variants can subclass them, type aliases last as
        they are evaluated at import and may name any of the classes.
        """
        bases = sorted(n for n, s in self.schemas.items() if "variant" in s)
        aliases = sorted(n for n, s in self.schemas.items() if self._is_alias(s))
        return bases + sorted(n for n in self.schemas if n not in bases and n not in aliases) + aliases

    def emit_call(self, cls: str, method: dict) -> list[str]:
        lines = [f"class {cls}(ApiCall):",
                 f'    method = "{method.get("httpMethod", "GET")}"',
                 f'    path = "{method.get("path", "")}"']
        if "response" in method:
            lines.append(f'    response = {method["response"]["$ref"]}')
        if method.get("supportsMediaUpload", False):
            lines.append("    upload = True")
        for pname, param in sorted(method.get("parameters", {}).items()):
            if pname in STANDARD_PARAMETERS or param.get("required", False) or param.get("location") == "path":
                continue
            hint, _ = self.type_hint(param)
            if param.get("repeated", False):
                self.uses.add("List")
                hint = f"List[{hint}]"
            ident = _identifier(pname, _RESERVED_CALL_NAMES)
            lines.append("")
            lines.append(f"    def {ident}(self, {ident}: {hint}) -> {cls}:")
            lines += docstring(param.get("description"), "        ")
            lines.append(f'        return self._query("{pname}", {ident})')
        return lines

    def emit_factory(self, mname: str, cls: str, method: dict, service: str = "self.service") -> list[str]:
        params = method.get("parameters", {})
        args = []
        path_params = []
        query = []
        for pname in method.get("parameterOrder", []):
            param = params.get(pname, {})
            ident = _identifier(pname, {"self"})
            hint, _ = self.type_hint(param)
            args.append(f"{ident}: {hint}")
            if param.get("location", "query") == "path":
                path_params.append(f'"{pname}": {ident}')
            else:
                query.append(f'"{pname}": {ident}')
        call_args = [service]
        if path_params:
            call_args.append("path_params={" + ", ".join(path_params) + "}")
        if query:
            call_args.append("query={" + ", ".join(query) + "}")
        if "request" in method:
            ref = method["request"]["$ref"]
            ident = _identifier(_lower_first(ref), {p.split(":")[0] for p in args})
            args.append(f"{ident}: {ref}|dict")
            call_args.append(f"body={ident}")
        lines = [f"    def {_identifier(mname, _RESERVED_SERVICE_NAMES)}(self{''.join(', ' + a for a in args)}) -> {cls}:"]
        lines += docstring(method.get("description"), "        ")
        lines.append(f"        return {cls}({', '.join(call_args)})")
        return lines

    def emit_resource(self, chain: list[str], resource: dict, out: list[str]) -> str:
        """Emit the calls, sub-resources and service for one resource, returns the service class name"""
        prefix = "".join(_cap(c) for c in chain)
        factories = []
        for mname, method in sorted(resource.get("methods", {}).items()):
            cls = f"{prefix}{_cap(mname)}Call"
            out += ["", ""] + self.emit_call(cls, method)
            factories += [""] + self.emit_factory(mname, cls, method)
        children = []
        for rname, sub in sorted(resource.get("resources", {}).items()):
            children.append((_identifier(rname, _RESERVED_SERVICE_NAMES), self.emit_resource(chain + [rname], sub, out)))

        service = f"{prefix}Service"
        self.service_names.add(service)
        lines = [f"class {service}(ResourceService):"]
        if children:
            lines += ["    def __init__(self, service: ApiService) -> None:",
                      "        super().__init__(service)"]
            lines += [f"        self.{attr} = {child}(service)" for attr, child in children]
        lines += factories[1:] if not children else factories
        if len(lines) == 1:
            lines.append("    pass")
        out += ["", ""] + lines
        return service

    def generate(self) -> str:
        doc = self.doc
        title = f"{doc.get('title', doc['name'])} {doc.get('version', '')}".strip()
        header = ['"""', _doc_text(title), ""]
        if doc.get("description"):
            header += textwrap.wrap(_doc_text(doc["description"]), 79)
        if doc.get("documentationLink"):
            header.append(f"See {doc['documentationLink']}")
        header += ["", f"Generated by gapirest.generator from the {doc.get('id', doc['name'])} discovery document.",
                   '"""', "from __future__ import annotations", ""]

        body = ["", f'API_ID = "{doc.get("id", doc["name"])}"',
                f'API_NAME = "{doc["name"]}"',
                f'API_VERSION = "{doc.get("version", "")}"',
                f'BASE_URL = "{self.base_url}"']
        scopes = doc.get("auth", {}).get("oauth2", {}).get("scopes", {})
        if scopes:
            body.append("")
            for url, s in sorted(scopes.items()):
                if s.get("description"):
                    body.append("# " + " ".join(str(s["description"]).split()))
                body.append(f'{scope_constant(url)} = "{url}"')

        for name in self.schema_order():
            body += ["", ""] + self.emit_schema(name, self.schemas[name])

        resources = []
        for rname, resource in sorted(doc.get("resources", {}).items()):
            resources.append((_identifier(rname, _RESERVED_SERVICE_NAMES), self.emit_resource([rname], resource, body)))
        root_factories = []
        for mname, method in sorted(doc.get("methods", {}).items()):
            cls = f"{_cap(mname)}Call"
            body += ["", ""] + self.emit_call(cls, method)
            root_factories += [""] + self.emit_factory(mname, cls, method, service="self")

        top = _cap(re.sub(r"\W", "", doc["name"])) + "Service"
        if top in self.service_names:
            # an API with a resource of its own name, e.g. widgets.widgets
            top = _cap(re.sub(r"\W", "", doc["name"])) + "ApiService"
        body += ["", "", f"class {top}(ApiService):"]
        body += docstring(title, "    ")
        body += ["    BASE_URL = BASE_URL", "",
                 "    def __init__(self, http, **kwargs) -> None:",
                 "        super().__init__(http, **kwargs)"]
        body += [f"        self.{attr} = {service}(self)" for attr, service in resources]
        body += root_factories

        imports = []
        if "dataclass" in self.uses:
            imports.append("from dataclasses import dataclass, field")
        typing_names = sorted(self.uses & {"Any", "List"})
        if typing_names:
            imports.append(f"from typing import {', '.join(typing_names)}")
        imports.append("")
        resource_names = sorted(self.uses & {"ApiResource", "INT64"})
        if resource_names:
            imports.append(f"from gapirest.resources import {', '.join(resource_names)}")
        imports.append("from gapirest.service import ApiCall, ApiService, ResourceService")
        if "TaggedUnion" in self.uses:
            imports.append("from gapirest.unions import TaggedUnion")
        return "\n".join(header + imports + body) + "\n"


def generate(document: dict) -> str:
    """Python source for the API described by a discovery document"""
    return ModuleGenerator(document).generate()


def load_document(source: str) -> dict:
    """Discovery document from a file path or an http(s) URL"""
    if re.match(r"^https?://", source):
        logger.debug("fetching discovery document %s", source)
        response = requests.get(source, timeout=60)
        response.raise_for_status()
        return response.json()
    with open(source, 'r', encoding='utf-8') as f:
        return json.load(f)


def main(argv: list[str]|None = None) -> int:
    parser = argparse.ArgumentParser(prog="gapirest-generate",
                                     description="Generate Python bindings from a Google API discovery document")
    parser.add_argument("source", help="discovery document, file path or URL")
    parser.add_argument("-o", "--output", help="output module path (default: stdout)")
    args = parser.parse_args(argv)

    document = load_document(args.source)
    source = generate(document)
    if args.output:
        out = Path(args.output)
        out.write_text(source, encoding='utf-8')
        print(f"[generate] {document.get('id', document['name'])} -> {out}", file=sys.stderr)
    else:
        sys.stdout.write(source)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
