"""
Thin, typed Python bindings for Google's discovery based REST APIs.

Every API method is a generated ApiCall that feeds a single RequestBuilder:
expand the path template, encode the query, serialize the body (or build a
multipart upload), send it through whatever requests style HTTP client the
ApiService was given and decode the JSON response back into dataclasses.

Resources are dataclasses derived from ApiResource with to_base()/from_base()
translating to and from the raw JSON dicts.  Polymorphic objects such as
GeoJSON geometries are TaggedUnion variants.

Right now the genomics v1beta2 and maps engine v1 APIs ship pre-generated,
gapirest.generator produces the same kind of module for any other discovery
document.
"""
