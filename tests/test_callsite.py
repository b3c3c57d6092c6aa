from smartlog.callsite import (
    UNKNOWN_SITE,
    CallSite,
    caller_site,
    site_of_function,
)


def module_level_probe():
    return caller_site(0)


class Probe:
    def method(self):
        return caller_site(0)

    def indirect(self):
        return self._helper()

    def _helper(self):
        return caller_site(1)


class TestCallSite:
    def test_str_format(self):
        assert str(CallSite("pkg.Foo", "bar", 12)) == "pkg.Foo.bar:12"


class TestCallerSite:
    def test_method_owner_is_qualified_class(self):
        site = Probe().method()
        assert site.class_name == f"{__name__}.Probe"
        assert site.method_name == "method"
        assert site.line_number > 0

    def test_module_function_owner_is_module(self):
        site = module_level_probe()
        assert site.class_name == __name__
        assert site.method_name == "module_level_probe"

    def test_depth_walks_up_the_stack(self):
        site = Probe().indirect()
        assert site.method_name == "indirect"
        assert site.class_name == f"{__name__}.Probe"

    def test_local_class_strips_enclosing_function(self):
        class Local:
            def run(self):
                return caller_site(0)

        site = Local().run()
        assert site.class_name == f"{__name__}.Local"
        assert site.method_name == "run"

    def test_too_deep_returns_placeholder(self):
        assert caller_site(10_000) == UNKNOWN_SITE


class TestSiteOfFunction:
    def test_method(self):
        site = site_of_function(Probe.method)
        assert site.class_name == f"{__name__}.Probe"
        assert site.method_name == "method"
        assert site.line_number == Probe.method.__code__.co_firstlineno

    def test_builtin_returns_placeholder(self):
        assert site_of_function(len) == UNKNOWN_SITE
