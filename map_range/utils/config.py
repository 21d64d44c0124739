import collections.abc


###################################################
### Implements recursive walk over a dictionary ###
###################################################
class Configurable(object):
    def __init__(self, config=None):
        self.config = self.default_config()
        if config:
            Configurable.custom_config(self.config, config)

    def update_config(self, config):
        Configurable.custom_config(self.config, config)

    @classmethod
    def default_config(cls):
        return {}

    @staticmethod
    def custom_config(d, u):
        for k, v in u.items():
            if isinstance(v, collections.abc.Mapping):
                d[k] = Configurable.custom_config(d.get(k, {}), v)
            else:
                d[k] = v
        return d


#######################################
### Plain dict view of a configured ###
#######################################
def serialize(obj):
    if hasattr(obj, "config"):
        d = dict(obj.config)
    else:
        d = {key: repr(value) for (key, value) in obj.__dict__.items()}
    d['__class__'] = repr(obj.__class__)
    return d
