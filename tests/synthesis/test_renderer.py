"""Tests for declaration rendering."""

from __future__ import annotations

from polydts.models import DeclarationDescriptor, DocComment, DocTag, MemberFragment, Shape
from polydts.synthesis.classifier import FeatureClassifier
from polydts.synthesis.renderer import DeclarationRenderer
from tests._fixtures.features import behavior, component, function, method, mixin, prop


def _render(feature) -> str:
    descriptor = FeatureClassifier().classify(feature)
    assert descriptor is not None
    return DeclarationRenderer().render_module(descriptor.module_key, [descriptor])


def test_class_block_with_readonly_property() -> None:
    text = _render(component("my-element", prop("label", "string", read_only=True)))

    assert text == (
        'declare module "my-element.html" {\n'
        "  export class MyElement {\n"
        "    readonly label: string;\n"
        "    constructor();\n"
        "  }\n"
        "}"
    )


def test_interface_emits_type_and_companion_value() -> None:
    text = _render(behavior("MyBehavior", method("doThing"), source_path="my-behavior.html"))

    assert text == (
        'declare module "my-behavior.html" {\n'
        "  export interface MyBehavior {\n"
        "    doThing(): void;\n"
        "    new (...args: any[]): MyBehavior;\n"
        "  }\n"
        "  export const MyBehavior: MyBehavior;\n"
        "}"
    )


def test_mixin_renders_inline_intersection() -> None:
    text = _render(mixin("my-mixin", prop("x", "number")))

    assert (
        "  export function MyMixin<T extends object>(Base: {new (...args: any[]): T}): "
        "{new (...args: any[]): T & { x: number }};"
    ) in text.splitlines()


def test_mixin_with_several_members_and_empty_mixin() -> None:
    several = _render(mixin("my-mixin", prop("x", "number"), method("go", "speed")))
    empty = _render(mixin("EmptyMixin"))

    assert "T & { x: number; go(speed: any): void }};" in several
    assert "T & {}};" in empty


def test_mixin_with_documented_members_expands_literal() -> None:
    text = _render(mixin("my-mixin", prop("x", "number", doc="The x value.")))

    assert text.splitlines()[1:-1] == [
        "  export function MyMixin<T extends object>(Base: {new (...args: any[]): T}): "
        "{new (...args: any[]): T & {",
        "    /**",
        "     * The x value.",
        "     */",
        "    x: number;",
        "  }};",
    ]


def test_function_declaration() -> None:
    text = _render(function("Polymer.importHref", "href", "onload", returns="HTMLLinkElement"))

    assert "  export function importHref(href: any, onload: any): any;" in text.splitlines()
    assert text.startswith('declare module "my-element.html#Polymer" {')


def test_doc_comments_indented_to_their_construct() -> None:
    descriptor = DeclarationDescriptor(
        name="MyElement",
        namespace=None,
        shape=Shape.CLASS,
        module_key="my-element.html",
        properties=(
            MemberFragment(text="label: string;", doc=DocComment(description="The label.")),
            MemberFragment(text="size: number;"),
        ),
        doc=DocComment(
            description="Material input.",
            tags=(DocTag(title="demo", description="demo/index.html"), DocTag(title="polymer")),
        ),
    )

    text = DeclarationRenderer().render_module(descriptor.module_key, [descriptor])

    assert text.splitlines() == [
        'declare module "my-element.html" {',
        "  /**",
        "   * Material input.",
        "   *",
        "   * @demo demo/index.html",
        "   * @polymer",
        "   */",
        "  export class MyElement {",
        "    /**",
        "     * The label.",
        "     */",
        "    label: string;",
        "    size: number;",
        "    constructor();",
        "  }",
        "}",
    ]


def test_no_trailing_whitespace_lines() -> None:
    text = _render(component("x-a", prop("a", "string", doc="One.\n\nTwo.")))

    assert all(line == line.rstrip() for line in text.splitlines())


def test_render_is_byte_stable_and_keeps_bucket_order() -> None:
    classifier = FeatureClassifier()
    descriptors = [
        classifier.classify(component("x-b", source_path="b.html")),
        classifier.classify(component("x-a", source_path="a.html")),
    ]
    bucket = {item.module_key: (item,) for item in descriptors if item is not None}
    renderer = DeclarationRenderer()

    first = renderer.render(bucket)
    second = renderer.render(bucket)

    assert first == second
    assert list(first) == ["b.html", "a.html"]
    assert renderer.render_declaration(descriptors[0]) == renderer.render_declaration(descriptors[0])


def test_module_key_is_quoted() -> None:
    descriptor = DeclarationDescriptor(name="A", namespace=None, shape=Shape.CLASS, module_key='odd"key')

    text = DeclarationRenderer().render_module(descriptor.module_key, [descriptor])

    assert text.startswith('declare module "odd\\"key" {')
