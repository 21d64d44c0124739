import copy

from map_range.utils.config import Configurable
from map_range.map_range import Range, map_range, checked_map_range
from map_range.numeric import check_overflow_policy, to_python


class RangeMapper(Configurable):
    """Remaps values from a fixed source range onto a fixed target range."""

    def __init__(self, config=None):
        super(RangeMapper, self).__init__(config)
        self.config = self.validate_config(self.config)

    @classmethod
    def default_config(cls):
        return {
            "source": [0, 1],
            "target": [0, 1],
            "overflow": "widen",
            "checked": False
        }

    def update_config(self, config):
        # a rejected update leaves the current config untouched
        updated = Configurable.custom_config(copy.deepcopy(self.config), config)
        self.config = self.validate_config(updated)

    @staticmethod
    def validate_config(config):
        # ranges are kept as lists of plain numbers so the config stays JSON friendly
        config["source"] = [to_python(x) for x in Range.of(config["source"])]
        config["target"] = [to_python(x) for x in Range.of(config["target"])]
        check_overflow_policy(config["overflow"])
        return config

    @property
    def source(self):
        return Range.of(self.config["source"])

    @property
    def target(self):
        return Range.of(self.config["target"])

    def map(self, value):
        if self.config["checked"]:
            return checked_map_range(value, self.source, self.target)
        return map_range(value, self.source, self.target, overflow=self.config["overflow"])

    def __call__(self, value):
        return self.map(value)

    def inverse(self):
        config = dict(self.config)
        config["source"], config["target"] = list(self.target), list(self.source)
        return RangeMapper(config)

    def __repr__(self):
        return "{}(source={}, target={}, overflow={!r})".format(
            self.__class__.__name__, tuple(self.source), tuple(self.target), self.config["overflow"])
