"""Pipeline step that filters attributes and generated identifiers."""

import logging
from typing import Optional

from ...classify import classify, filter_classes
from ...dom import class_list, iter_elements
from ...models.config import AttributeConfig, ClassifierConfig
from ..base import CompressContext

logger = logging.getLogger(__name__)


class AttributeStep:
    """
    Pipeline step that drops attributes outside the allow-list.

    Class tokens and ids judged machine-generated by the classifier are
    dropped as well, so they do not split otherwise identical siblings
    during deduplication.

    Example:
        step = AttributeStep(AttributeConfig(), ClassifierConfig())
        ctx = step.execute(ctx)
    """

    name = "attributes"

    def __init__(
        self,
        config: Optional[AttributeConfig] = None,
        classifier: Optional[ClassifierConfig] = None,
    ):
        """
        Initialize the attribute step.

        Args:
            config: Attribute allow-list settings
            classifier: Configuration for generated-identifier detection
        """
        self.config = config or AttributeConfig()
        self.classifier = classifier or ClassifierConfig()
        self._keep = frozenset(self.config.keep_attributes) | frozenset(self.config.keep_data_attributes)

    def execute(self, ctx: CompressContext) -> CompressContext:
        """Filter attributes on every element of the tree."""
        soup = ctx.require_soup()

        attributes_removed = 0
        classes_removed = 0
        ids_removed = 0

        for tag in iter_elements(soup):
            # Get list of attrs to remove (can't modify during iteration)
            attrs_to_remove = [attr for attr in tag.attrs if attr not in self._keep]
            for attr in attrs_to_remove:
                del tag[attr]
            attributes_removed += len(attrs_to_remove)

            if not self.config.drop_generated_identifiers:
                continue

            if tag.has_attr("class"):
                classes = class_list(tag)
                kept = filter_classes(classes, self.classifier)
                classes_removed += len(classes) - len(kept)
                if kept:
                    tag["class"] = kept
                else:
                    del tag["class"]

            element_id = tag.get("id")
            if isinstance(element_id, str) and (not element_id.strip() or classify(element_id, self.classifier)):
                del tag["id"]
                ids_removed += 1

        logger.debug(
            f"Removed {attributes_removed} attributes, {classes_removed} generated classes, "
            f"{ids_removed} generated ids"
        )
        ctx.record(
            self.name,
            {
                "attributes_removed": attributes_removed,
                "classes_removed": classes_removed,
                "ids_removed": ids_removed,
            },
        )
        return ctx
