"""
Integration tests: derived classes built on ClassBase, used the way
application code uses them.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from class_base import ClassBase


class TestBaseClass:

    def test_instantiate_and_report(self):
        obj = ClassBase.new()
        assert obj
        assert obj.error('barf') is None
        assert obj.error() == 'barf'

    def test_factory_scenario(self):
        factory = {'kind': 'widget-factory'}
        obj = ClassBase.new('factory', factory)
        assert obj is not None
        assert obj.factory is factory


class TestAlwaysFailing:

    def test_never_constructs(self, failing_class):
        for args in [(), ('name', 'foo'), ({'factory': 1},)]:
            assert failing_class.new(*args) is None
            assert failing_class.error() == 'expected failure'


class TestNameRequired:

    def test_missing_name(self, named_class):
        assert named_class.new() is None
        assert named_class.error() == 'No name!'

    def test_mapping_form(self, named_class):
        obj = named_class.new({'name': 'foo'})
        assert obj
        assert not obj.error()
        assert obj.name() == 'foo'

    def test_pairs_form(self, named_class):
        obj = named_class.new('name', 'foo')
        assert obj
        assert not obj.error()
        assert obj.name() == 'foo'

    def test_forms_equivalent(self, named_class):
        from_mapping = named_class.new({'name': 'foo', 'factory': 'f'})
        from_pairs = named_class.new('name', 'foo', 'factory', 'f')

        assert vars(from_mapping) == vars(from_pairs)


class Connection(ClassBase):
    """A derived class that reports errors from methods other than init()."""

    def init(self, config):
        self.host = config.get('host')
        self.port = config.get('port', 80)
        if not self.host:
            return self.error("no host argument")
        if not isinstance(self.port, int):
            return self.error("invalid port: ", self.port)
        return self

    def send(self, payload):
        if not payload:
            return self.error("nothing to send to ", self.host)
        return len(payload)


class TestMethodErrors:

    def test_construction_errors(self):
        assert Connection.new() is None
        assert Connection.error() == "no host argument"

        assert Connection.new(host='example.org', port='http') is None
        assert Connection.error() == "invalid port: http"

    def test_instance_method_error(self):
        conn = Connection.new(host='example.org')

        assert conn.send(b'hello') == 5
        assert conn.send(b'') is None
        assert conn.error() == "nothing to send to example.org"

        # A method failure is an instance matter, the class slot is untouched
        assert Connection.error() == ''


class TestConcurrentConstruction:

    def test_failures_on_different_classes_isolated(self, failing_class, named_class):
        barrier = threading.Barrier(4)

        def construct(cls):
            barrier.wait()
            for _ in range(100):
                cls.new()

        with ThreadPoolExecutor(max_workers=4) as pool:
            list(pool.map(construct, [failing_class, named_class, failing_class, named_class]))

        assert failing_class.error() == 'expected failure'
        assert named_class.error() == 'No name!'
        assert ClassBase.error() == ''
