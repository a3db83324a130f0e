import inspect

import pytest

from cssforge import (
    BaseSelector,
    CssSelectorBuilder,
    NonRepetitiveError,
    OrderError,
    Selector,
    attr,
    class_,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from cssforge.exceptions import NON_REPETITIVE_MESSAGE, ORDER_MESSAGE
from cssforge.models import FragmentKind


def test_id_with_classes(builder):
    selector = builder.id('main').class_('container').class_('editable')
    assert selector.stringify() == '#main.container.editable'


def test_element_attr_pseudo_class(builder):
    selector = builder.element('a').attr('href$=".png"').pseudo_class('focus')
    assert selector.stringify() == 'a[href$=".png"]:focus'


def test_full_compound_selector(builder):
    selector = (
        builder.element('input')
        .id('search')
        .class_('wide')
        .class_('dark')
        .attr('type="text"')
        .attr('required')
        .pseudo_class('focus')
        .pseudo_class('not(:disabled)')
        .pseudo_element('placeholder')
    )
    assert selector.render() == 'input#search.wide.dark[type="text"][required]:focus:not(:disabled)::placeholder'


@pytest.mark.parametrize(
    ('factory', 'expected'),
    [
        (element, 'div'),
        (id_, '#div'),
        (class_, '.div'),
        (attr, '[div]'),
        (pseudo_class, ':div'),
        (pseudo_element, '::div'),
    ],
)
def test_module_level_factories(factory, expected):
    assert factory('div').stringify() == expected


def test_factories_return_independent_selectors():
    first = element('div')
    second = element('span')
    first.class_('a')

    assert first is not second
    assert second.stringify() == 'span'


def test_chaining_returns_same_instance(builder):
    selector = builder.element('p')
    assert selector.class_('lead') is selector


def test_render_is_idempotent(builder):
    selector = builder.element('li').class_('item').pseudo_class('hover')
    assert selector.render() == selector.render() == str(selector) == 'li.item:hover'


def test_values_are_not_escaped(builder):
    assert builder.attr('data-x="a b]"').render() == '[data-x="a b]"]'


def test_empty_selector_renders_empty_string():
    assert Selector().render() == ''


def test_fragments_keep_append_order(builder):
    selector = builder.element('a').class_('x').class_('y')
    assert [(f.kind, f.value) for f in selector.fragments] == [
        (FragmentKind.ELEMENT, 'a'),
        (FragmentKind.CLASS, 'x'),
        (FragmentKind.CLASS, 'y'),
    ]


def test_repr_shows_rendered_value(builder):
    assert repr(builder.element('a').id('top')) == "Selector('a#top')"


def test_second_id_is_non_repetitive(builder):
    with pytest.raises(NonRepetitiveError) as exc_info:
        builder.element('div').id('main').id('main2')

    assert str(exc_info.value) == NON_REPETITIVE_MESSAGE
    assert exc_info.value.kind is FragmentKind.ID


def test_id_after_class_is_order_error(builder):
    with pytest.raises(OrderError) as exc_info:
        builder.element('div').id('main').class_('x').id('y')

    assert str(exc_info.value) == ORDER_MESSAGE
    assert exc_info.value.kind is FragmentKind.ID
    assert exc_info.value.blocking_kind is FragmentKind.CLASS


def test_class_after_attr_is_order_error(builder):
    with pytest.raises(OrderError):
        builder.class_('a').attr('href').class_('b')


def test_pseudo_class_after_pseudo_element_is_order_error(builder):
    with pytest.raises(OrderError) as exc_info:
        builder.pseudo_element('after').pseudo_class('hover')

    assert exc_info.value.blocking_kind is FragmentKind.PSEUDO_ELEMENT


def test_rejected_append_leaves_selector_unchanged(builder):
    selector = builder.element('a').attr('href')

    with pytest.raises(OrderError):
        selector.class_('late')

    assert selector.render() == 'a[href]'


def test_rejection_is_logged(builder, mocker):
    mock_logfire = mocker.patch('cssforge.builder.logfire')
    selector = builder.element('a')

    with pytest.raises(NonRepetitiveError):
        selector.element('b')

    mock_logfire.warn.assert_called_once_with(
        'Rejected selector fragment', kind='element', reason='non_repetitive', selector='a'
    )


def test_base_selector_is_abstract():
    with pytest.raises(TypeError):
        BaseSelector()


def test_subclass_without_render_cannot_be_created():
    class Incomplete(BaseSelector):
        pass

    with pytest.raises(TypeError):
        Incomplete()


@pytest.mark.parametrize('cls', [Selector, CssSelectorBuilder])
@pytest.mark.parametrize('name', ['element', 'id', 'class_', 'attr', 'pseudo_class', 'pseudo_element'])
def test_public_fragment_methods_are_documented(cls, name):
    assert inspect.getdoc(getattr(cls, name))
