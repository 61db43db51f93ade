"""Query string helpers for side-loading and collection iterators."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from zendesk.config import ITERATOR_KEYS


def prepare_query_params(
    sideload: Sequence[str] | None = None,
    iterators: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build extra query params for a collection request.

    Args:
        sideload: Related resources to embed, sent as ``include=a,b``
        iterators: Paging/sorting options; only per_page, page, sort_order
            and sort_by are kept, anything else is dropped

    Returns:
        Flat dict of query params (empty when nothing was given)
    """
    params: dict[str, Any] = {}
    if sideload is not None:
        params["include"] = ",".join(sideload)

    if iterators is not None:
        for key, value in iterators.items():
            if key in ITERATOR_KEYS:
                params[key] = value

    return params
