"""Resolution of display indices against the model's filtered view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from woofareyou.service_layer.errors import InvalidPetIndexError

if TYPE_CHECKING:
    from woofareyou.domain import Pet
    from woofareyou.interfaces.model import AbstractModel
    from woofareyou.service_layer.commands import Index


def pet_at(index: Index, model: AbstractModel) -> Pet:
    """Return the pet shown at `index` in the current filtered view.

    The view can change between parsing and execution, so the range check
    always happens here rather than when the command is built.

    Raises:
        InvalidPetIndexError: If `index` lies outside the current view.
    """
    shown = model.get_filtered_pet_list()
    if index.zero_based >= len(shown):
        raise InvalidPetIndexError(index.one_based, len(shown))
    return shown[index.zero_based]
