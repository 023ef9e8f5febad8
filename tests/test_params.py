import threading

import pytest

from hexfm.params import TOTAL_LFOS, TOTAL_OPERATORS, AtomicParam, PatchParameters


def _grid():
    return [[f"{i}to{n}Param" for n in range(TOTAL_OPERATORS)] for i in range(TOTAL_OPERATORS)]


def test_atomic_param_default_is_zero():
    assert AtomicParam().load() == 0


def test_store_and_load():
    param = AtomicParam(1.5)
    param.store(2.5)
    assert param.load() == 2.5


def test_store_from_copies_value():
    source = AtomicParam(7)
    target = AtomicParam(0)
    target.store_from(source)
    assert target.load() == 7


def test_equality_and_greater_than_with_raw_values():
    param = AtomicParam(3)
    assert param == 3
    assert not (param == 4)
    assert param > 2
    assert not (param > 3)


def test_concurrent_stores_leave_a_stored_value():
    param = AtomicParam(0)
    threads = [threading.Thread(target=param.store, args=(v,)) for v in range(1, 9)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert param.load() in range(1, 9)


def test_patch_parameters_shapes_and_defaults():
    params = PatchParameters()
    assert len(params.op_ratio) == TOTAL_OPERATORS
    assert len(params.lfo_rate) == TOTAL_LFOS
    assert len(params.op_routing) == TOTAL_OPERATORS
    assert all(len(row) == TOTAL_OPERATORS for row in params.op_routing)
    assert params.working_fundamental == 440.0
    assert params.routing_has_changed == 0


def test_instances_do_not_share_cells():
    a = PatchParameters()
    b = PatchParameters()
    a.op_level[0].store(0.5)
    assert b.op_level[0].load() == 0.0


def test_set_routing_marks_nonzero_cells():
    grid = _grid()
    tree = {pid: 0.0 for row in grid for pid in row}
    tree["0to1Param"] = 1.0
    tree["5to2Param"] = 0.3
    params = PatchParameters()
    params.op_routing[3][3].store(1)
    params.set_routing(tree, grid)
    on = {(i, n) for i in range(TOTAL_OPERATORS) for n in range(TOTAL_OPERATORS)
          if params.op_routing[i][n].load() == 1}
    assert on == {(0, 1), (5, 2)}


def test_set_routing_missing_parameter_raises():
    params = PatchParameters()
    with pytest.raises(KeyError):
        params.set_routing({}, _grid())


def test_set_routing_small_grid_raises():
    params = PatchParameters()
    with pytest.raises(ValueError):
        params.set_routing({}, [["0to0Param"]])