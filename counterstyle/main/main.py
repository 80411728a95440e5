import sys
import os.path

import logging
logger = logging.getLogger(__name__)

import yaml


from .configmerger import ConfigMerger
configmerger = ConfigMerger()

from ..counterstyle import _expect_int
from ..config import CounterStyleRegistry
from ..template import parse_template, parse_tag_template


def load_external_configs(arg_config):

    load_config_files = []

    # figure out which config files to load.
    if isinstance(arg_config, dict):
        return [ arg_config ]

    if isinstance(arg_config, str) and arg_config:
        load_config_files = [ arg_config ]
    else:
        # see if there's a counterstyle.(yaml|yml) in the current directory.
        # Only the FIRST EXISTING EXTENSION is read.
        for tryfname in ('counterstyle.yaml', 'counterstyle.yml'):
            if os.path.exists(tryfname):
                load_config_files.append(tryfname)
                break

    logger.debug(f"Identified config files to load: {','.join(load_config_files)}")

    loaded_config_datas = []
    for config_file in load_config_files:
        # parse a YAML file
        with open(config_file, encoding='utf-8') as f:
            logger.info(f"Loading counterstyle config from {config_file}")
            data = yaml.safe_load(f)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid configuration file ‘{config_file}’, expected a mapping at top level"
            )
        data['$_cwd'] = os.path.dirname(config_file)
        loaded_config_datas.append( data )

    if len(loaded_config_datas) == 0:
        loaded_config_datas = [ {} ]

    return loaded_config_datas



class Main:
    def __init__(self, **kwargs):
        super().__init__()

        self.arg_indices = kwargs.get('indices', None)
        self.arg_style = kwargs.get('style', None)
        self.arg_template = kwargs.get('template', None)
        self.arg_tag_template = kwargs.get('tag_template', None)
        self.arg_config = kwargs.get('config', None)
        self.arg_list_styles = kwargs.get('list_styles', False)
        self.arg_start = kwargs.get('start', None)
        self.arg_stop = kwargs.get('stop', None)
        self.arg_output = kwargs.get('output', None)
        self.arg_separator = kwargs.get('separator', None)
        self.arg_suppress_final_newline = kwargs.get('suppress_final_newline', False)

        # load config & defaults

        orig_configs = load_external_configs(self.arg_config)
        config = configmerger.recursive_assign_defaults(orig_configs)

        logger.debug("Loaded configuration is %r", config)

        registry = CounterStyleRegistry()
        registry.load_config(config)

        self.config = config
        self.registry = registry

        if self.arg_separator is None:
            self.arg_separator = config.get('separator', '\n')

        self.indices = self._get_indices()

    def _get_indices(self):
        indices = [ _expect_int(i, "index") for i in (self.arg_indices or []) ]
        if self.arg_start is not None or self.arg_stop is not None:
            if self.arg_start is None or self.arg_stop is None:
                raise ValueError("You need to specify both the start and the stop index")
            start = _expect_int(self.arg_start, "start index")
            stop = _expect_int(self.arg_stop, "stop index")
            indices += list(range(start, stop + 1))
        return indices

    def get_formatter(self):
        r"""
        Return the formatter selected by the arguments: a template, a tag
        template, or a named style (by default the configuration's
        ``default-style``, or ``decimal``).
        """
        if self.arg_template is not None:
            return parse_template(self.arg_template, self.registry)
        if self.arg_tag_template is not None:
            initials_styles = {
                initial: self.registry[name]
                for (initial, name) in self.registry.abbreviations.items()
            }
            return parse_tag_template(self.arg_tag_template, initials_styles)
        style = self.arg_style
        if style is None:
            style = self.config.get('default-style', 'decimal')
        return self.registry[style]

    def render_labels(self):
        if self.arg_list_styles:
            return self.registry.names()
        if not self.indices:
            raise ValueError("No indices specified.  Type `counterstyle --help` for more information.")
        formatter = self.get_formatter()
        return [ formatter(index) for index in self.indices ]

    def run(self):

        labels = self.render_labels()

        if self.arg_list_styles:
            result = "\n".join(labels)
        else:
            result = self.arg_separator.join(labels)

        #
        # Write to output
        #
        arg_output = self.arg_output

        def open_context_fout():
            if not arg_output or arg_output == '-':
                return _TrivialContextManager(sys.stdout)
            elif hasattr(arg_output, 'write'):
                # it's a file-like object, use it directly
                return _TrivialContextManager(arg_output)
            else:
                return open(arg_output, 'w', encoding='utf-8')

        with open_context_fout() as fout:

            fout.write(result)

            if not self.arg_suppress_final_newline:
                fout.write("\n")

            if isinstance(arg_output, str) and arg_output != '-':
                logger.info('Output to ‘%s’', arg_output)

        return {
            'labels': labels,
            'result': result,
            'output': arg_output,
        }



def main(**kwargs):
    a = Main(**kwargs)
    return a.run()




# ------------------------------------------------------------------------------



class _TrivialContextManager:
    def __init__(self, value):
        super().__init__()
        self.value = value

    def __enter__(self):
        return self.value

    def __exit__(self, *args):
        pass
