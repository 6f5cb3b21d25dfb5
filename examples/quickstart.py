"""Quickstart example for variantxml.

Describes a small tagged-union type, builds values of it and serializes
them to events, XML text and ElementTree elements.
"""

import xml.etree.ElementTree as ET

from variantxml import (
    EnumSchema,
    FieldDescriptor,
    SerializerConfig,
    VariantDescriptor,
    to_element,
    to_events,
    to_string,
)
from variantxml.schema import STRING, U32, ListKind, NestedKind, OptionalKind

# Example 1: Describe a type
print("=" * 50)
print("Example 1: Unit, named and positional variants")
print("=" * 50)

shape = EnumSchema(
    "Shape",
    (
        VariantDescriptor.unit("Empty"),
        VariantDescriptor.named(
            "Point",
            FieldDescriptor.attribute("x"),
            FieldDescriptor.element("y", U32),
        ),
        VariantDescriptor.positional("Label", STRING),
        VariantDescriptor.positional("Tags", ListKind(STRING)),
        VariantDescriptor.positional("Weight", OptionalKind(U32)),
    ),
)

print(to_string(shape.value("Empty")))
# Output: <Empty/>

print(to_string(shape.value("Point", x="A", y=7)))
# Output: <Point x="A"><y>7</y></Point>

print(to_string(shape.value("Tags", ["red", "round"])))
# Output: <Tags>red</Tags><Tags>round</Tags>

print(repr(to_string(shape.value("Weight", None))))
# Output: ''

# Example 2: Raw events
print("\n" + "=" * 50)
print("Example 2: Event stream")
print("=" * 50)

for event in to_events(shape.value("Point", x="A", y=7)):
    print(event)
# Output:
# StartElement(name='Point', attributes=(('x', 'A'),))
# StartElement(name='y', attributes=())
# Characters(text='7')
# EndElement(name='y')
# EndElement(name='Point')

# Example 3: Nested values
print("\n" + "=" * 50)
print("Example 3: Nested variants")
print("=" * 50)

drawing = EnumSchema(
    "Drawing",
    (
        VariantDescriptor.named(
            "Layer",
            FieldDescriptor.attribute("name"),
            FieldDescriptor.element("item", ListKind(NestedKind("Shape"))),
        ),
    ),
    root="drawing",
)

layer = drawing.value(
    "Layer",
    name="base",
    item=[shape.value("Empty"), shape.value("Label", "hello")],
)
print(to_string(layer))
# Output: <drawing><Layer name="base"><item><Empty/></item><item><Label>hello</Label></item></Layer></drawing>

# Example 4: ElementTree output and configuration
print("\n" + "=" * 50)
print("Example 4: ElementTree and XML declaration")
print("=" * 50)

element = to_element(layer)
print(element.tag, [child.tag for child in element])
# Output: drawing ['Layer']

print(ET.tostring(to_element(shape.value("Tags", ["a", "b"]), container="tags"), encoding="unicode"))
# Output: <tags><Tags>a</Tags><Tags>b</Tags></tags>

print(to_string(shape.value("Empty"), config=SerializerConfig(xml_declaration=True)))
# Output:
# <?xml version="1.0" encoding="utf-8"?>
# <Empty/>
