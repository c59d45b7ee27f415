"""
Test suite for dot-path writes and nested mapping preparation.
"""

import unittest

import pytest

from configtree.core.enums import WritePolicy
from configtree.core.exceptions import InvalidArgumentError, PathIndexError
from configtree.tree import (
    MISSING, MappingNode, PathResolver, ScalarNode, SequenceNode, TreeMutator,
    prepare_for_set, to_node
)

from config_stubs import FIRST_SEED

pytestmark = pytest.mark.unit


class TestTreeMutatorContainers(unittest.TestCase):
    """Writes whose parent resolves to a mapping or a sequence."""

    def setUp(self):
        self.tree = to_node(FIRST_SEED)

    def test_insert_into_existing_mapping(self):
        TreeMutator.set(self.tree, 'first.new', 'new-value')

        self.assertEqual(PathResolver.get(self.tree, 'first.new'), ScalarNode('new-value'))
        self.assertEqual(PathResolver.get(self.tree, 'first.test'), ScalarNode(1))
        self.assertEqual(PathResolver.get(self.tree, 'first.string'), ScalarNode('test'))

    def test_overwrite_in_mapping(self):
        TreeMutator.set(self.tree, 'multiple.first.second.third.fourth', 44)
        self.assertEqual(
            PathResolver.get(self.tree, 'multiple.first.second.third.fourth'), ScalarNode(44)
        )

    def test_mapping_write_is_visible_through_held_node(self):
        first = PathResolver.get(self.tree, 'first')
        TreeMutator.set(self.tree, 'first.shared', 'yes')
        self.assertEqual(first.get('shared'), ScalarNode('yes'))

    def test_container_values_are_converted(self):
        TreeMutator.set(self.tree, 'first.nested', {'a': [1, 2]})

        self.assertIsInstance(PathResolver.get(self.tree, 'first.nested'), MappingNode)
        self.assertEqual(PathResolver.get(self.tree, 'first.nested.a.1'), ScalarNode(2))

    def test_replace_scalar_by_mapping_through_parent(self):
        TreeMutator.set(self.tree, 'first.string', {'now': 'a mapping'})
        self.assertEqual(PathResolver.get(self.tree, 'first.string.now'), ScalarNode('a mapping'))

    def test_overwrite_sequence_element(self):
        TreeMutator.set(self.tree, 'first.vector.1', 'new-two-value')

        vector = PathResolver.get(self.tree, 'first.vector')
        self.assertEqual(vector.to_literal(), ['one', 'new-two-value', 'three'])

    def test_non_integer_key_on_sequence(self):
        with self.assertRaises(InvalidArgumentError) as ctx:
            TreeMutator.set(self.tree, 'first.vector.new', 'new-value')

        self.assertEqual(ctx.exception.key, 'new')
        self.assertIsInstance(ctx.exception, ValueError)

    def test_non_integer_key_on_sequence_fails_under_merge(self):
        with self.assertRaises(InvalidArgumentError):
            TreeMutator.set(self.tree, 'first.vector.new', 'new-value', WritePolicy.MERGE)

    def test_sequence_write_out_of_range_does_not_append(self):
        with self.assertRaises(PathIndexError):
            TreeMutator.set(self.tree, 'first.vector.3', 'four')
        self.assertEqual(len(PathResolver.get(self.tree, 'first.vector')), 3)

    def test_single_segment_inserts_at_root(self):
        TreeMutator.set(self.tree, 'new-path', 'new-path-value')
        self.assertEqual(PathResolver.get(self.tree, 'new-path'), ScalarNode('new-path-value'))

    def test_single_segment_overwrites_at_root(self):
        TreeMutator.set(self.tree, 'first', 'flat')
        self.assertEqual(PathResolver.get(self.tree, 'first'), ScalarNode('flat'))


class TestTreeMutatorStrict(unittest.TestCase):
    """Writes whose parent is missing or a scalar, STRICT policy."""

    def setUp(self):
        self.tree = to_node(FIRST_SEED)

    def test_write_through_scalar_fails(self):
        with self.assertRaises(InvalidArgumentError):
            TreeMutator.set(self.tree, 'first.string.fake', 'new-fake-value', WritePolicy.STRICT)

        self.assertEqual(PathResolver.get(self.tree, 'first.string'), ScalarNode('test'))

    def test_missing_parent_rebuilds_first_segment(self):
        tree = to_node({'a': {'x': 1}, 'other': 2})

        TreeMutator.set(tree, 'a.b.c', 'v', WritePolicy.STRICT)

        self.assertEqual(tree.to_literal(), {'a': {'b': {'c': 'v'}}, 'other': 2})

    def test_missing_top_level_parent(self):
        TreeMutator.set(self.tree, 'brand.new.key', 3)

        self.assertEqual(self.tree.get('brand').to_literal(), {'new': {'key': 3}})
        self.assertIsNot(self.tree.get('first'), MISSING)

    def test_missing_parent_below_sequence_element(self):
        tree = to_node({'items': [{'name': 'a'}]})

        TreeMutator.set(tree, 'items.0.options.colour', 'red')

        # The rebuilt chain holds mappings only, the sequence is replaced
        self.assertEqual(tree.to_literal(), {'items': {'0': {'options': {'colour': 'red'}}}})


class TestTreeMutatorMerge(unittest.TestCase):
    """Writes whose parent is missing or a scalar, MERGE policy."""

    def setUp(self):
        self.tree = to_node(FIRST_SEED)

    def test_write_through_scalar_rebuilds_first_segment(self):
        TreeMutator.set(self.tree, 'first.string.fake', 'new-fake-value', WritePolicy.MERGE)

        self.assertEqual(
            PathResolver.get(self.tree, 'first.string.fake'), ScalarNode('new-fake-value')
        )
        # Siblings under the rebuilt top-level key are dropped
        self.assertIs(PathResolver.get(self.tree, 'first.test'), MISSING)
        self.assertIs(PathResolver.get(self.tree, 'first.vector'), MISSING)
        # Other top-level keys survive
        self.assertEqual(
            PathResolver.get(self.tree, 'multiple.first.second.third.fourth'), ScalarNode(4)
        )

    def test_missing_parent_rebuilds_first_segment(self):
        TreeMutator.set(self.tree, 'first.missing.leaf', 'v', WritePolicy.MERGE)

        self.assertEqual(self.tree.get('first').to_literal(), {'missing': {'leaf': 'v'}})

    def test_missing_top_level_parent(self):
        TreeMutator.set(self.tree, 'brand.new', 'v', WritePolicy.MERGE)

        self.assertEqual(PathResolver.get(self.tree, 'brand.new'), ScalarNode('v'))
        self.assertEqual(PathResolver.get(self.tree, 'first.test'), ScalarNode(1))


class TestPrepareForSet(unittest.TestCase):

    def test_non_string_keys(self):
        keys = {'foo': 'bar'}
        self.assertIs(prepare_for_set(keys, 'baz'), keys)

    def test_with_final_value(self):
        self.assertEqual(prepare_for_set('foo', 'bar', 'baz'), {'foo': {'bar': 'baz'}})

    def test_with_dotted_value_and_final_value(self):
        self.assertEqual(
            prepare_for_set('foo', 'bar.qux', 'baz'), {'foo': {'bar': {'qux': 'baz'}}}
        )

    def test_with_none_final_value(self):
        self.assertEqual(prepare_for_set('foo', 'bar', None), {'foo': {'bar': None}})

    def test_with_one_key(self):
        self.assertEqual(prepare_for_set('foo', 'bar'), {'foo': 'bar'})

    def test_with_multiple_key(self):
        self.assertEqual(
            prepare_for_set('foo.bar.baz', 'fake-value'),
            {'foo': {'bar': {'baz': 'fake-value'}}}
        )

    def test_does_not_convert_values(self):
        value = ['a', 'b']
        self.assertIs(prepare_for_set('foo.bar', value)['foo']['bar'], value)


def test_sequence_write_keeps_node_identity():
    tree = to_node({'seq': ['x', 'y']})
    sequence = tree.get('seq')

    TreeMutator.set(tree, 'seq.0', 'w')

    assert tree.get('seq') is sequence
    assert isinstance(sequence, SequenceNode)
    assert sequence.to_literal() == ['w', 'y']
