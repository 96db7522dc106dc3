"""Classification of analyzed features into declaration descriptors."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..config import GeneratorConfig
from ..logging import get_logger
from ..models import (
    COMPONENT,
    FUNCTION,
    MIXIN,
    NAMESPACE_VALUE,
    SHARED_BEHAVIOR,
    AnalyzedFeature,
    DeclarationDescriptor,
    DocComment,
    MemberFragment,
    MemberRecord,
    Shape,
)
from .naming import derive_module_key, split_identifier, to_identifier_case
from .types import TypeMapper

# When a record carries several kind tags the first match wins.
_SHAPE_PRIORITY: Tuple[Tuple[str, Shape], ...] = (
    (COMPONENT, Shape.CLASS),
    (SHARED_BEHAVIOR, Shape.INTERFACE),
    (MIXIN, Shape.HIGHER_ORDER_FUNCTION),
    (FUNCTION, Shape.FUNCTION),
    (NAMESPACE_VALUE, Shape.INTERFACE),
)


def shape_for(feature: AnalyzedFeature) -> Optional[Shape]:
    for kind, shape in _SHAPE_PRIORITY:
        if kind in feature.kinds:
            return shape
    return None


def _trimmed(doc: DocComment) -> DocComment:
    description = doc.description.strip()
    if description == doc.description:
        return doc
    return DocComment(description=description, tags=doc.tags)


class FeatureClassifier:
    """Turns one analyzed feature into one declaration descriptor."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        *,
        type_mapper: TypeMapper | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.types = type_mapper or TypeMapper(
            self.config.void_methods, self.config.unrepresentable_types
        )
        self.logger = get_logger("classifier")

    def classify_all(self, features: Iterable[AnalyzedFeature]) -> List[DeclarationDescriptor]:
        descriptors: List[DeclarationDescriptor] = []
        for feature in features:
            descriptor = self.classify(feature)
            if descriptor is not None:
                descriptors.append(descriptor)
        return descriptors

    def classify(self, feature: AnalyzedFeature) -> Optional[DeclarationDescriptor]:
        shape = shape_for(feature)
        if shape is None:
            self.logger.debug("Skipping feature with unsupported kinds %s", sorted(feature.kinds))
            return None

        raw_name, namespace = split_identifier(feature.identifier, feature.tag_name)
        if not raw_name:
            self.logger.debug("Skipping unnamed feature from %s", feature.source_path)
            return None
        # Functions keep their declared spelling; everything else is a type name.
        name = raw_name if shape is Shape.FUNCTION else to_identifier_case(raw_name)

        module_key = derive_module_key(
            feature.source_path, namespace, self.config.dependency_roots
        )
        properties, methods = self._member_fragments(feature.members)

        signature: Optional[str] = None
        if shape is Shape.FUNCTION:
            call = MemberRecord(
                name=name,
                kind="method",
                params=feature.params,
                return_type=feature.return_type,
            )
            signature = f"({self.types.render_params(call.params or ())}): {self.types.return_type(call)}"

        return DeclarationDescriptor(
            name=name,
            namespace=namespace,
            shape=shape,
            module_key=module_key,
            properties=properties,
            methods=methods,
            doc=_trimmed(feature.doc),
            signature=signature,
        )

    def _member_fragments(
        self, members: Iterable[MemberRecord]
    ) -> Tuple[Tuple[MemberFragment, ...], Tuple[MemberFragment, ...]]:
        properties: List[MemberFragment] = []
        methods: List[MemberFragment] = []
        for member in members:
            if not member.is_public:
                continue
            if not self.types.is_representable(member.type):
                self.logger.debug("Dropping member %s with type %s", member.name, member.type)
                continue
            fragment = MemberFragment(text=self.types.render_member(member), doc=_trimmed(member.doc))
            if self.types.is_function_shaped(member):
                methods.append(fragment)
            else:
                properties.append(fragment)
        return tuple(properties), tuple(methods)


__all__ = ["FeatureClassifier", "shape_for"]
