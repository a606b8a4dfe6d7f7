from mstgraph.data_structures.basic.hash_table import HashTable


class Collide:
    """自定义对象，使其哈希值相同以触发冲突。"""

    def __init__(self, value):
        self.value = value

    def __hash__(self):
        return 42

    def __eq__(self, other):
        return isinstance(other, Collide) and self.value == other.value


def test_hash_table_collision_handling():
    table = HashTable(max_size=4)
    k1 = Collide("a")
    k2 = Collide("b")

    assert table.insert(k1, 1)
    assert table.insert(k2, 2)

    assert table.find(k1) == 1
    assert table.find(k2) == 2

    assert table.remove(k1)
    assert table.find(k1) is None
    assert table.find(k2) == 2
    assert not table.remove(k1)


def test_hash_table_is_bounded():
    table = HashTable(max_size=2)
    assert table.insert("x", 1)
    assert table.insert("y", 2)
    assert table.is_full()
    assert not table.insert("z", 3)
    assert len(table.buckets) == 2
    assert table.execute() == {"x": 1, "y": 2}


def test_hash_table_duplicate_key_rejected():
    table = HashTable(max_size=8)
    assert table.insert("k", 1)
    assert not table.insert("k", 2)
    assert table.find("k") == 1
    assert table.size() == 1
    assert "k" in table


def test_hash_table_custom_hash_and_equality():
    table = HashTable(
        max_size=8,
        hash_func=lambda key: len(key),
        key_equal=lambda a, b: a.lower() == b.lower(),
    )
    table.insert("Kruskal", "mst")
    assert table.find("KRUSKAL") == "mst"
    assert sorted(table) == [("Kruskal", "mst")]
    assert table.remove("kruskal")
    assert table.is_empty()
