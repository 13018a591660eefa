from typing import Any, ClassVar, Dict

import pytest

from hatstall import DecodeError, ModelDecoder, Requestable, ResourceDescriptor


class Item(Requestable):
    base_path: ClassVar[str] = "/items"
    default_params: ClassVar[Dict[str, Any]] = {"expand": ["owner"]}

    id: int


@pytest.fixture
def decoder() -> ModelDecoder:
    return ModelDecoder()


class TestDescriptor:
    def test_descriptor(self):
        descriptor = Item.descriptor()

        assert descriptor == ResourceDescriptor(
            base_path="/items", default_params={"expand": ["owner"]}
        )

    def test_descriptor_defaults_are_read_only(self):
        with pytest.raises(TypeError):
            Item.descriptor().default_params["x"] = 1  # type: ignore[index]

    def test_default_descriptor(self):
        assert Requestable.descriptor() == ResourceDescriptor()


class TestModelDecoder:
    def test_decode(self, decoder: ModelDecoder):
        item = decoder.decode(Item, {"id": 1, "extra": "kept"})

        assert item.id == 1
        assert item.model_extra == {"extra": "kept"}

    @pytest.mark.parametrize("value", [{"id": "not-a-number"}, {}, [1], "x", None])
    def test_decode_rejects(self, decoder: ModelDecoder, value: Any):
        with pytest.raises(DecodeError):
            decoder.decode(Item, value)

    def test_decode_many(self, decoder: ModelDecoder):
        items = decoder.decode_many(Item, [{"id": 3}, {"id": 1}])

        assert [item.id for item in items] == [3, 1]

    @pytest.mark.parametrize("value", [{"id": 1}, [{"id": 1}, {}], None])
    def test_decode_many_rejects(self, decoder: ModelDecoder, value: Any):
        with pytest.raises(DecodeError):
            decoder.decode_many(Item, value)
