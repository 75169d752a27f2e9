import threading

from olafengine.refcount import ReferenceCounter


def test_new_counter_has_one_reference():
    assert ReferenceCounter().ref_count == 1


def test_share_adds_reference_seen_by_all():
    first = ReferenceCounter()
    second = first.share()
    assert first.ref_count == second.ref_count == 2


def test_release_drops_reference():
    first = ReferenceCounter()
    second = first.share()
    second.release()
    assert second.ref_count == 0
    assert first.ref_count == 1


def test_release_twice_is_harmless():
    first = ReferenceCounter()
    other = first.share()
    other.release()
    other.release()
    assert first.ref_count == 1


def test_take_moves_without_counting():
    first = ReferenceCounter()
    keeper = first.share()
    moved = first.take()
    assert first.ref_count == 0
    assert moved.ref_count == keeper.ref_count == 2


def test_share_of_released_handle_is_empty():
    handle = ReferenceCounter()
    handle.release()
    assert handle.share().ref_count == 0


def test_context_manager_releases():
    first = ReferenceCounter()
    with first.share() as second:
        assert second.ref_count == 2
    assert first.ref_count == 1


def test_concurrent_share_and_release_balance():
    root = ReferenceCounter()

    def worker():
        for _ in range(200):
            root.share().release()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert root.ref_count == 1