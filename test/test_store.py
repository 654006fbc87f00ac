from grubdash.store import IdGenerator, Store


def test_store_operations():
    store = Store([{"id": "a"}, {"id": "b"}])
    store.append({"id": "c"})

    assert len(store) == 3
    assert store.find(lambda item: item["id"] == "b") == {"id": "b"}
    assert store.find(lambda item: item["id"] == "z") is None
    assert store.find_index(lambda item: item["id"] == "c") == 2
    assert store.find_index(lambda item: item["id"] == "z") == -1

    assert store.remove_at(0) == {"id": "a"}
    assert [item["id"] for item in store.all()] == ["b", "c"]


def test_store_copies_initial_items():
    seed = [{"id": "a"}]
    store = Store(seed)
    store.append({"id": "b"})
    assert len(seed) == 1


def test_id_generator_produces_unique_ids():
    ids = IdGenerator()
    generated = {ids.next() for _ in range(1000)}
    assert len(generated) == 1000
    assert all(len(value) == 32 for value in generated)
