# (C) 2024 Irreducible Inc.

import functools
import pathlib
import types
from typing import Callable, Dict, List, Tuple

import pytest


def pytest_pycollect_makemodule(module_path: pathlib.Path, parent) -> pytest.Module:
    """
    Collects a test module and expands every test marked with @pytest.mark.parametrize_hypothesis.

    Args:
        module_path (pathlib.Path): path of the collected file
        parent: parent collector

    Returns:
        pytest.Module: Created module.
    """
    if module_path.name == "__init__.py":
        pkg: pytest.Package = pytest.Package.from_parent(parent, path=module_path)
        return pkg
    mod: pytest.Module = pytest.Module.from_parent(parent, path=module_path)
    handle_parametrize_hypothesis(mod)
    return mod


def handle_parametrize_hypothesis(mod: pytest.Module) -> None:
    """
    Replaces each test marked with @pytest.mark.parametrize_hypothesis(name=[decorators...], ...) by one copy per
    keyword argument. The copy for `name` is wrapped in the listed hypothesis decorators and marked with
    @pytest.mark.<name>, so that e.g. `-m fast` selects a cheap variant of an exhaustive property test.

    Args:
        mod (pytest.Module): pytest module
    """

    test_func_by_name: Dict[str, Callable] = {}

    for obj_name, obj in getattr(mod.obj, "__dict__", {}).items():
        if callable(obj) and hasattr(obj, "pytestmark"):
            if any(mark.name == "parametrize_hypothesis" for mark in obj.pytestmark):
                test_func_by_name[obj_name] = obj

    for test_func_name, test_func in test_func_by_name.items():
        delattr(mod.obj, test_func_name)

        parametrize_hypothesis: pytest.Mark = next(
            (m for m in getattr(test_func, "pytestmark", []) if m.name == "parametrize_hypothesis"),
        )
        if len(parametrize_hypothesis.args) > 0:
            raise ValueError(
                f"@pytest.mark.parametrize_hypothesis for '{mod.name}.{test_func_name}' takes keyword arguments only"
            )

        for mark_name, decorator_list in parametrize_hypothesis.kwargs.items():
            if not isinstance(decorator_list, (list, tuple, set)):
                raise ValueError(
                    f"@pytest.mark.parametrize_hypothesis for '{mod.name}.{test_func_name}': "
                    + f"value for {mark_name} is not a list: {decorator_list}"
                )

            new_test_func_name = test_func_name + "_" + mark_name
            new_test_func = copy_test_func_and_apply_decorators(test_func, new_test_func_name, decorator_list)
            new_test_func = getattr(pytest.mark, mark_name)(new_test_func)
            setattr(mod.obj, new_test_func_name, new_test_func)


def copy_test_func_and_apply_decorators(
    test_func: Callable,
    new_name: str,
    decorator_list: List | Tuple | set,
) -> Callable:
    """
    Copies a test function under a new name and decorates the copy with the given decorators.

    Args:
        test_func (Callable): The original test function to be copied.
        new_name (str): The name for the new function
        decorator_list (List[Callable]): list of decorators to apply to new function

    Returns:
        Callable: The new test function.
    """
    new_test_func: Callable = types.FunctionType(
        code=test_func.__code__,
        globals=test_func.__globals__,
        name=new_name,
        argdefs=test_func.__defaults__,
        closure=test_func.__closure__,
    )
    new_test_func = functools.update_wrapper(new_test_func, test_func)
    for decorator in decorator_list:
        if not callable(decorator):
            raise ValueError(f"failed to create test function {new_name}, this is not decorator: {decorator}")
        new_test_func = decorator(new_test_func)

    return new_test_func
