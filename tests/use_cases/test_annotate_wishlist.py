from __future__ import annotations

from unittest.mock import Mock

from autolot.ports.saved_car_repository import SavedCarRepository
from autolot.use_cases.annotate_wishlist import WishlistAnnotator
from factories import make_car, uid


def test_anonymous_skips_the_store() -> None:
    store = Mock(spec=SavedCarRepository)
    cars = [make_car(1, wishlisted=True), make_car(2)]

    annotated = WishlistAnnotator(store).annotate(cars, None)

    assert [car.wishlisted for car in annotated] == [False, False]
    store.saved_car_ids.assert_not_called()


def test_fetches_saved_ids_once_and_keeps_order() -> None:
    store = Mock(spec=SavedCarRepository)
    store.saved_car_ids.return_value = {uid(3), uid(1)}
    cars = [make_car(3), make_car(2), make_car(1)]

    annotated = WishlistAnnotator(store).annotate(cars, uid(1001))

    assert [car.id for car in annotated] == [uid(3), uid(2), uid(1)]
    assert [car.wishlisted for car in annotated] == [True, False, True]
    store.saved_car_ids.assert_called_once_with(uid(1001))


def test_empty_page() -> None:
    store = Mock(spec=SavedCarRepository)
    store.saved_car_ids.return_value = set()

    assert WishlistAnnotator(store).annotate([], uid(1001)) == []
