import pytest

from battleships.scenes import (
    Scene,
    SceneBuilder,
    get_current_scene,
    set_current_scene,
)


@pytest.fixture(autouse=True)
def no_scene():
    set_current_scene(None)
    yield
    set_current_scene(None)


def test_builder_callbacks_are_called():
    calls = []
    scene = (
        SceneBuilder()
        .with_init(lambda: calls.append("init"))
        .with_render(lambda: calls.append("render"))
        .with_event(lambda event: calls.append(("event", event)))
        .build()
    )
    scene.on_init()
    scene.on_render()
    scene.on_event("click")
    assert calls == ["init", "render", ("event", "click")]


def test_build_returns_distinct_scenes():
    builder = SceneBuilder()
    first = builder.build()
    second = builder.build()
    assert first is not second
    assert isinstance(first, Scene)


def test_later_builder_changes_do_not_affect_built_scene():
    calls = []
    builder = SceneBuilder().with_render(lambda: calls.append("old"))
    scene = builder.build()
    builder.with_render(lambda: calls.append("new"))
    scene.on_render()
    assert calls == ["old"]


def test_scene_without_callbacks_ignores_hooks():
    scene = SceneBuilder().build()
    scene.on_init()
    scene.on_render()
    scene.on_event(object())
    assert scene.init_callback is None
    assert scene.event_callback is None


def test_set_current_scene_initialises_it():
    calls = []
    scene = SceneBuilder().with_init(lambda: calls.append("init")).build()
    set_current_scene(scene)
    assert get_current_scene() is scene
    assert calls == ["init"]


def test_set_current_scene_none_clears():
    set_current_scene(SceneBuilder().build())
    set_current_scene(None)
    assert get_current_scene() is None