import json
import logging
import os

from map_range.utils.config import Configurable, serialize
from map_range.mapper import RangeMapper

logger = logging.getLogger(__name__)


#**************************************************
# Load range mapper configuration from a JSON file
#**************************************************
def load_mapper_config(config_path):
    with open(config_path) as f:
        mapper_config = json.loads(f.read())
    mapper_config.pop("__class__", None)
    if "base_config" in mapper_config:
        # relative base configs are resolved next to the file naming them
        base_path = os.path.join(os.path.dirname(config_path), mapper_config.pop("base_config"))
        base_config = load_mapper_config(base_path)
        mapper_config = Configurable.custom_config(base_config, mapper_config)
    return mapper_config


#*************************************
# Create range mapper from config file
#*************************************
def load_mapper(config_path):
    mapper = RangeMapper(load_mapper_config(config_path))
    logger.debug("Loaded {} from {}".format(mapper, config_path))
    return mapper


#***********************************
# Save range mapper to a config file
#***********************************
def save_mapper(mapper, config_path):
    # encoded before opening, so a failure leaves no partial file behind
    content = json.dumps(serialize(mapper), sort_keys=True, indent=4)
    with open(config_path, 'w') as f:
        f.write(content)
    logger.debug("Saved {} to {}".format(mapper, config_path))
