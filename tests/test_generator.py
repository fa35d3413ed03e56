import json
import sys
import types
from pathlib import Path

import pytest

from gapirest.generator import docstring, generate, main, scope_constant
from gapirest.resources import ApiResource
from gapirest.service import ApiCall, ApiService, ResourceService
from gapirest.unions import TaggedUnion

DATA = Path(__file__).parent / "data"


@pytest.fixture
def document():
    with open(DATA / "widgets_discovery.json", 'r', encoding='utf-8') as f:
        return json.load(f)


def load(document, monkeypatch):
    source = generate(document)
    module = types.ModuleType("widgets_v2")
    monkeypatch.setitem(sys.modules, "widgets_v2", module)
    exec(compile(source, "widgets_v2.py", "exec"), module.__dict__)
    return module


@pytest.fixture
def widgets(document, monkeypatch):
    """The generated module, imported under a throwaway name"""
    return load(document, monkeypatch)


def test_scope_constant():
    assert(scope_constant("https://www.googleapis.com/auth/genomics.readonly") == "GENOMICS_READONLY_SCOPE")
    assert(scope_constant("https://www.googleapis.com/auth/devstorage.read_write") == "DEVSTORAGE_READ_WRITE_SCOPE")
    assert(scope_constant("https://www.googleapis.com/auth/bigquery") == "BIGQUERY_SCOPE")


def test_docstring():
    assert(docstring(None, "    ") == [])
    assert(docstring("Gets a widget.", "    ") == ['    """Gets a widget."""'])
    long = "word " * 40
    lines = docstring(long, "        ")
    assert(lines[0] == '        """')
    assert(lines[-1] == '        """')
    assert(all(len(l) <= 8 + 72 for l in lines))
    assert(" ".join(l.strip() for l in lines[1:-1]) == long.strip())


def test_not_a_document():
    with pytest.raises(ValueError):
        generate({"kind": "something"})
    with pytest.raises(ValueError):
        generate([])


def test_constants(widgets):
    assert(widgets.API_ID == "widgets:v2")
    assert(widgets.API_NAME == "widgets")
    assert(widgets.API_VERSION == "v2")
    assert(widgets.BASE_URL == "https://widgets.example.com/widgets/v2/")
    assert(widgets.WIDGETS_SCOPE == "https://www.googleapis.com/auth/widgets")
    assert(widgets.WIDGETS_READONLY_SCOPE == "https://www.googleapis.com/auth/widgets.readonly")
    assert("Widgets API v2" in widgets.__doc__)
    assert("See https://example.com/widgets/docs" in widgets.__doc__)


def test_source_text(document):
    source = generate(document)
    assert(source.startswith('"""\nWidgets API v2\n'))
    assert("from __future__ import annotations\n" in source)
    assert("from typing import Any, List\n" in source)
    assert("from gapirest.resources import ApiResource, INT64\n" in source)
    assert("from gapirest.unions import TaggedUnion\n" in source)
    assert("    size: int|None = field(default=None, metadata=INT64)\n" in source)
    assert("    def class_(self, class_: str) -> WidgetsListCall:\n" in source)
    assert("    def media_(self, media_: str) -> WidgetsListCall:\n" in source)
    assert("    def fields(" not in source)
    assert('class Shape(TaggedUnion, discriminant="type"):\n    pass\n' in source)
    assert("Point = List[float]\n" in source)
    assert(source.endswith("\n"))


def test_schemas(widgets):
    assert(issubclass(widgets.Widget, ApiResource))
    assert(widgets.Widget.__doc__ == "A widget, the thing this API is all about.")
    w = widgets.Widget(id="w1", size=12, from_=3, labels={'a': ["b"]}, parts=[widgets.Part(name="p")])
    assert(w.to_base() == {'id': "w1", 'size': "12", 'from': "3", 'labels': {'a': ["b"]}, 'parts': [{'name': "p"}]})
    assert(widgets.Widget.from_base(w.to_base()) == w)
    assert(widgets.Empty().to_base() == {})
    assert(widgets.Point == widgets.List[float])


def test_union_schemas(widgets):
    assert(issubclass(widgets.Shape, TaggedUnion))
    assert(widgets.Shape.variants() == {'Circle': widgets.Circle, 'Polygon': widgets.Polygon})
    p = widgets.Shape.from_base({'type': "Polygon", 'points': [[0, 0], [1, 0.5]]})
    assert(isinstance(p, widgets.Polygon))
    assert(p.points == [[0.0, 0.0], [1.0, 0.5]])
    assert(widgets.Circle(radius=2.0).to_base() == {'type': "Circle", 'radius': 2.0})


def test_service_tree(widgets, session):
    # the widgets resource already took WidgetsService
    assert(issubclass(widgets.WidgetsApiService, ApiService))
    assert(issubclass(widgets.WidgetsService, ResourceService))
    svc = widgets.WidgetsApiService(session)
    assert(svc.base_url == widgets.BASE_URL)
    assert(isinstance(svc.widgets, widgets.WidgetsService))
    assert(isinstance(svc.widgets.blueprints, widgets.WidgetsBlueprintsService))
    assert(svc.widgets.blueprints.service is svc)


def test_call_classes(widgets):
    assert(issubclass(widgets.WidgetsGetCall, ApiCall))
    assert(widgets.WidgetsGetCall.method == "GET")
    assert(widgets.WidgetsGetCall.path == "widgets/{widgetId}")
    assert(widgets.WidgetsGetCall.response is widgets.Widget)
    assert(widgets.WidgetsDeleteCall.response is None)
    assert(widgets.WidgetsBlueprintsUploadCall.upload)
    assert(not widgets.WidgetsGetCall.upload)
    assert(widgets.WidgetsListCall.fields is ApiCall.fields)
    assert(widgets.WidgetsGetCall.view.__doc__ == "How much of the widget to return.")


def test_list_setters(widgets, session):
    svc = widgets.WidgetsApiService(session)
    call = svc.widgets.list("p1").pageSize(10).tag(["a", "b"]).minSize(5)
    call = call.class_("big").media_("m").includeDeleted(True)
    assert(isinstance(call, widgets.WidgetsListCall))
    req = call.request()
    assert(req.path == "/widgets/v2/widgets")
    assert(req.query == "alt=json&class=big&includeDeleted=true&media=m&minSize=5&pageSize=10&project=p1&tag=a%2Cb")


def test_list_execute(widgets, session):
    session.reply(200, {
        'widgets': [{'id': "w1", 'size': "12", 'shape': {'type': "Circle", 'radius': 1}, 'labels': {'a': ["b"]}}],
        'nextPageToken': "N"
    })
    svc = widgets.WidgetsApiService(session)
    resp = svc.widgets.list("p1").pageToken("T1").execute()
    assert(isinstance(resp, widgets.ListWidgetsResponse))
    assert(resp.nextPageToken == "N")
    w = resp.widgets[0]
    assert(w.size == 12)
    assert(isinstance(w.shape, widgets.Circle))
    assert(w.labels == {'a': ["b"]})
    assert(session.calls[0]['url'] == "https://widgets.example.com/widgets/v2/widgets?alt=json&pageToken=T1&project=p1")


def test_insert_body(widgets, session):
    session.reply(200, {'id': "new"})
    svc = widgets.WidgetsApiService(session)
    w = svc.widgets.insert(widgets.Widget(size=1, shape=widgets.Circle(radius=1.0))).execute()
    assert(w == widgets.Widget(id="new"))
    call = session.calls[0]
    assert(call['method'] == "POST")
    assert(json.loads(call['data']) == {'size': "1", 'shape': {'type': "Circle", 'radius': 1.0}})


def test_root_method(widgets, session):
    session.reply(200, b"{}")
    svc = widgets.WidgetsApiService(session)
    assert(svc.ping().request().path == "/widgets/v2/ping")
    assert(svc.ping().execute() is None)


def test_upload(widgets, session):
    svc = widgets.WidgetsApiService(session)
    call = svc.widgets.blueprints.upload("w1", "bp.pdf").media(b"%PDF-1.4", "application/pdf")
    req = call.request()
    assert(req.path == "/upload/widgets/v2/widgets/w1/blueprints")
    assert(req.query == "alt=json&filename=bp.pdf&uploadType=multipart")
    assert(b"%PDF-1.4" in req.body)
    with pytest.raises(TypeError):
        svc.widgets.get("w1").media(b"x")


def test_main_to_file(tmp_path, capsys, document):
    out = tmp_path / "widgets_v2.py"
    assert(main([str(DATA / "widgets_discovery.json"), "-o", str(out)]) == 0)
    assert(out.read_text(encoding='utf-8') == generate(document))
    assert("[generate] widgets:v2 -> " in capsys.readouterr().err)


def test_main_to_stdout(capsys, document):
    assert(main([str(DATA / "widgets_discovery.json")]) == 0)
    assert(capsys.readouterr().out == generate(document))


def test_descriptions_with_backslashes_and_newlines(document, monkeypatch):
    document["description"] = 'Paths look like C:\\ and """quoted""" text'
    document["resources"]["widgets"]["methods"]["get"]["description"] = "A path like C:\\"
    document["schemas"]["Part"]["description"] = "Ends in a quote \\\""
    scopes = document["auth"]["oauth2"]["scopes"]
    scopes["https://www.googleapis.com/auth/widgets"]["description"] = "Manage gadgets\nand   widgets"
    source = generate(document)
    assert("# Manage gadgets and widgets\n" in source)
    module = load(document, monkeypatch)
    assert("Paths look like C:\\ and '''quoted''' text" in module.__doc__)
    assert(module.WidgetsService.get.__doc__ == "A path like C:\\")
    assert(module.Part.__doc__ == 'Ends in a quote \\" ')


def test_resources_named_like_service_members(document, monkeypatch, session):
    document["resources"]["config"] = {"methods": {"get": {
        "id": "widgets.config.get", "path": "config", "httpMethod": "GET"
    }}}
    document["methods"]["timeout"] = {"id": "widgets.timeout", "path": "timeout", "httpMethod": "GET"}
    source = generate(document)
    assert("        self.config_ = ConfigService(self)\n" in source)
    assert("    def timeout_(self) -> TimeoutCall:\n" in source)
    module = load(document, monkeypatch)
    svc = module.WidgetsApiService(session, timeout=5)
    assert(isinstance(svc.config_, module.ConfigService))
    assert(svc.config['timeout'] == 5)
    assert(svc.timeout == 5)
    assert(svc.timeout_().request().path == "/widgets/v2/timeout")
    assert(svc.config_.get().request().path == "/widgets/v2/config")
