"""Search request and response models for the ``xml.search`` service."""

from __future__ import annotations

from collections.abc import Iterator

from lxml import etree
from pydantic import BaseModel, Field

from gn_client.exceptions import GNLibError

NS_GEONET = "http://www.fao.org/geonetwork"


class SearchRequest(BaseModel):
    """Structured search request.

    An empty request has no filter: every metadata record is returned.

    Example:
        >>> request = SearchRequest().add("any", "roads").add("sortBy", "title")
    """

    criteria: list[tuple[str, str]] = Field(default_factory=list)

    def add(self, field: str, value: str) -> SearchRequest:
        self.criteria.append((field, value))
        return self

    def to_xml(self) -> bytes:
        root = etree.Element("request")
        for field, value in self.criteria:
            etree.SubElement(root, field).text = value
        return etree.tostring(root, xml_declaration=True, encoding="UTF-8")


class GNMetadata(BaseModel):
    """A single metadata record listed in a search response."""

    id: int
    uuid: str
    schema_name: str | None = None
    create_date: str | None = None
    change_date: str | None = None
    source: str | None = None


class SearchResponse(BaseModel):
    """Parsed ``xml.search`` response.

    ``count`` is the total number of matches reported by GeoNetwork, while
    iteration and ``len()`` cover only the records listed in this response.
    A response listing no records is falsy even when ``count`` is non-zero,
    so test ``count`` rather than the response itself.
    """

    count: int
    from_: int | None = None
    to: int | None = None
    metadata: list[GNMetadata] = Field(default_factory=list)

    def __iter__(self) -> Iterator[GNMetadata]:  # type: ignore[override]
        return iter(self.metadata)

    def __len__(self) -> int:
        return len(self.metadata)

    @classmethod
    def from_xml(cls, document: bytes | str) -> SearchResponse:
        """Parse a search response.

        Raises:
            GNLibError: If the document is not a valid search response
        """
        if isinstance(document, str):
            document = document.encode("utf-8")
        try:
            root = etree.fromstring(document)
        except etree.XMLSyntaxError as e:
            raise GNLibError(f"Unparseable search response: {e}") from e

        summary = root.find("summary")
        if summary is None or summary.get("count") is None:
            raise GNLibError("Search response has no summary count")

        try:
            return cls(
                count=int(summary.get("count")),
                from_=_int_or_none(root.get("from")),
                to=_int_or_none(root.get("to")),
                metadata=[_parse_metadata(md) for md in root.findall("metadata")],
            )
        except ValueError as e:
            raise GNLibError(f"Bad search response: {e}") from e


def _parse_metadata(element: etree._Element) -> GNMetadata:
    info = element.find(f"{{{NS_GEONET}}}info")
    if info is None:
        raise GNLibError("Metadata entry has no geonet:info element")

    def text(tag: str) -> str | None:
        return info.findtext(tag)

    md_id = text("id")
    uuid = text("uuid")
    if md_id is None or uuid is None:
        raise GNLibError("Metadata entry is missing id or uuid")

    return GNMetadata(
        id=int(md_id),
        uuid=uuid,
        schema_name=text("schema"),
        create_date=text("createDate"),
        change_date=text("changeDate"),
        source=text("source"),
    )


def _int_or_none(value: str | None) -> int | None:
    return int(value) if value is not None else None
