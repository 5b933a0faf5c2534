"""Tests for the Car record."""

from __future__ import annotations

from dataclasses import replace

from car_registry.domain.car import Car, is_blank


def test_identity_is_the_plate_number() -> None:
    """Two records with the same plate are equal whatever else differs."""
    first = Car(brand="Kia", model="Rio", year=2019, plate_number="XYZ987", color="Rojo", user_id=1)
    second = Car(brand="Ford", model="Ka", year=2001, plate_number="XYZ987", color=None, user_id=2)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_different_plates_are_different_cars() -> None:
    first = Car(brand="Kia", model="Rio", year=2019, plate_number="A1", color="Rojo", user_id=1)
    second = Car(brand="Kia", model="Rio", year=2019, plate_number="B2", color="Rojo", user_id=1)

    assert first != second


def test_has_photo_ignores_blank_urls() -> None:
    car = Car(brand="Kia", model="Rio", year=2019, plate_number="A1", color=None, user_id=1)

    assert car.has_photo is False
    assert replace(car, photo_url=" ").has_photo is False
    assert replace(car, photo_url="http://img/1.jpg").has_photo is True


def test_full_description() -> None:
    car = Car(brand="Kia", model="Rio", year=2019, plate_number="A1", color=None, user_id=1)

    assert car.full_description == "Kia Rio 2019"


def test_is_blank() -> None:
    assert is_blank(None) is True
    assert is_blank(" \t") is True
    assert is_blank("x") is False
