"""lxml helpers shared by the table, row and cell serializers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from lxml import etree

from document_tables.utils.exceptions import ErrorCode, MalformedTableError

_TWO_PLACES = Decimal("0.01")
_MAX_DIGITS = 320

_parser = etree.XMLParser(remove_blank_text=True)


def qname(namespace: str, local: str) -> str:
    """Clark-notation name ``{namespace}local``, or ``local`` without a namespace."""
    if not namespace:
        return local
    return f"{{{namespace}}}{local}"


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def namespace_of(element: etree._Element) -> str:
    """Namespace URI of an element, or an empty string when it has none."""
    return etree.QName(element).namespace or ""


def make_element(
    namespace: str,
    local: str,
    attrib: dict[str, str] | None = None,
    nsmap: dict[str | None, str] | None = None,
) -> etree._Element:
    return etree.Element(qname(namespace, local), attrib or {}, nsmap=nsmap)


def sub_element(
    parent: etree._Element,
    namespace: str,
    local: str,
    attrib: dict[str, str] | None = None,
) -> etree._Element:
    return etree.SubElement(parent, qname(namespace, local), attrib or {})


def child_elements(
    element: etree._Element, namespace: str, local: str
) -> list[etree._Element]:
    """Direct children with the given name, in document order."""
    return element.findall(qname(namespace, local))


def format_width(width: float) -> str:
    """Format a width with the invariant ``0.0#`` pattern.

    At least one and at most two fraction digits, halves rounded away from
    zero: 1 -> "1.0", 1.5 -> "1.5", 2.345 -> "2.35". Any finite float can be
    formatted; infinities and NaN raise ValueError.
    """
    try:
        value = Decimal(str(width))
    except InvalidOperation as e:
        raise ValueError(f"Width is not a number: {width!r}") from e
    if not value.is_finite():
        raise ValueError(f"Width is not a finite number: {width!r}")

    with localcontext() as ctx:
        # Room for every integer digit of the largest float plus two places.
        ctx.prec = _MAX_DIGITS
        value = value.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)

    text = f"{value:f}"
    if text.endswith("0"):
        text = text[:-1]
    return text


def parse_width(text: str | None) -> float:
    if text is None or not text.strip():
        return 0.0
    return float(text)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_bool(text: str | None) -> bool:
    """Read a boolean attribute; anything other than "true" is False."""
    return text is not None and text.strip().lower() == "true"


def parse_xml(text: str | bytes) -> etree._Element:
    """Parse an XML document and return its root element.

    Raises:
        MalformedTableError: If the input is not well-formed XML.
    """
    if isinstance(text, str):
        text = text.encode("utf-8")
    try:
        return etree.fromstring(text, _parser)
    except etree.XMLSyntaxError as e:
        raise MalformedTableError(
            f"Table XML is not well-formed: {e}",
            error_code=ErrorCode.XML_SYNTAX_ERROR,
        ) from e


def to_xml_string(element: etree._Element, pretty_print: bool = False) -> str:
    return etree.tostring(element, encoding="unicode", pretty_print=pretty_print)
