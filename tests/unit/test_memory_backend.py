import asyncio

from prefs_lib.storage.memory_backend import MemoryBackend


def test_memory_basic_operations():
    m = MemoryBackend()

    # set/get
    asyncio.run(m.set_text('k', '"v"'))
    assert m.get_text('k') == '"v"'
    assert m.keys() == {'k'}

    # remove, including a missing key
    asyncio.run(m.remove('k'))
    asyncio.run(m.remove('k'))
    assert m.get_text('k') is None

    # clear_all
    m2 = MemoryBackend({'a': '1', 'b': '2'})
    asyncio.run(m2.clear_all())
    assert m2.keys() == set()

    # close is a no-op
    assert asyncio.run(m2.close()) is None


def test_shared_instance_and_initial_values():
    first = MemoryBackend.get_instance()
    assert MemoryBackend.get_instance() is first

    seeded = MemoryBackend.set_initial_values({'x': '1'})
    assert seeded is not first
    assert MemoryBackend.get_instance() is seeded
    assert seeded.get_text('x') == '1'
