"""Property-based tests over generated schemas and values.

Every generated value must serialize deterministically into a balanced
event stream obeying the per-shape rules, and the text and tree writers
must agree on the result.

Python 3.13+.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from tests.helpers.event_assertions import assert_balanced, assert_is_start
from tests.strategies import scalar_kinds, scalar_values, variant_values, xml_identifiers
from variantxml import (
    EnumSchema,
    FieldDescriptor,
    VariantDescriptor,
    VariantShape,
    VariantValue,
    to_element,
    to_events,
    to_string,
)
from variantxml.schema import OptionalKind
from variantxml.serializer import format_scalar
from variantxml.writer import Characters, EndElement, StartElement


class TestEventStreamProperties:
    """Structural guarantees of every event stream."""

    @given(value=variant_values())
    def test_balanced(self, value: VariantValue) -> None:
        """PROPERTY: every end event closes the innermost open start event."""
        assert_balanced(to_events(value))

    @given(value=variant_values())
    def test_deterministic(self, value: VariantValue) -> None:
        """PROPERTY: serializing twice yields the same events."""
        assert to_events(value) == to_events(value)

    @given(value=variant_values())
    def test_unit_variants_are_one_pair(self, value: VariantValue) -> None:
        """PROPERTY: unit variants emit exactly [start, end] without attributes."""
        if value.descriptor.shape is not VariantShape.UNIT:
            event("shape=other")
            return
        event("shape=unit")

        assert to_events(value) == [StartElement(value.variant), EndElement(value.variant)]

    @given(value=variant_values())
    def test_named_attributes_follow_declaration(self, value: VariantValue) -> None:
        """PROPERTY: only String attributes are written, in declaration order."""
        descriptor = value.descriptor
        events = to_events(value)
        if descriptor.shape is not VariantShape.NAMED or not events:
            return

        start = assert_is_start(events[0])
        expected = tuple(
            (f.identifier, value[f.identifier or ""])
            for f in descriptor.fields
            if f.is_string_attribute
        )
        assert start.name == value.variant
        assert start.attributes == expected
        assert events[-1] == EndElement(value.variant)

    @given(value=variant_values())
    def test_optional_fields_never_written(self, value: VariantValue) -> None:
        """PROPERTY: optional fields of named variants produce no events."""
        descriptor = value.descriptor
        if descriptor.shape is not VariantShape.NAMED:
            return
        optional = {
            f.identifier for f in descriptor.fields if isinstance(f.kind, OptionalKind)
        }
        event(f"optional_fields={len(optional)}")

        children = to_events(value)[1:-1]
        assert not [e for e in children if isinstance(e, StartElement) and e.name in optional]

    @given(value=variant_values())
    def test_characters_inside_elements(self, value: VariantValue) -> None:
        """PROPERTY: without text content, characters only appear inside an element."""
        depth = 0
        for item in to_events(value):
            match item:
                case StartElement():
                    depth += 1
                case EndElement():
                    depth -= 1
                case Characters():
                    assert depth > 0


class TestTextContentProperty:
    """Text content replaces the wrapper."""

    @given(name=xml_identifiers, data=st.data())
    def test_single_characters_event(self, name: str, data: st.DataObject) -> None:
        """PROPERTY: a lone text content field yields one characters event."""
        kind = data.draw(scalar_kinds())
        payload = data.draw(scalar_values(kind))
        variant = VariantDescriptor.named(name, FieldDescriptor.text("v", kind))
        schema = EnumSchema("Inline", (variant,))

        assert to_events(schema.value(name, v=payload)) == [
            Characters(format_scalar(kind, payload))
        ]


class TestWriterAgreement:
    """Text output parses back into the tree the tree writer builds."""

    @given(value=variant_values())
    @settings(deadline=None)
    def test_text_and_tree_agree(self, value: VariantValue) -> None:
        """PROPERTY: parsed text output equals the ElementTreeWriter result."""
        parsed = ET.fromstring("<root>" + to_string(value) + "</root>")
        built = to_element(value, container="root")

        assert ET.tostring(parsed) == ET.tostring(built)

    @pytest.mark.fuzz
    @given(value=variant_values())
    @settings(max_examples=2000, deadline=None)
    def test_text_and_tree_agree_fuzz(self, value: VariantValue) -> None:
        """FUZZ: text/tree agreement over a large sample."""
        parsed = ET.fromstring("<root>" + to_string(value) + "</root>")

        assert ET.tostring(parsed) == ET.tostring(to_element(value, container="root"))
