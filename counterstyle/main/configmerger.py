import importlib
import os.path

from collections.abc import Mapping

from urllib.parse import urlparse
from urllib.request import urlopen

import yaml

import logging
logger = logging.getLogger(__name__)



class PresetKeepMarker:
    def __init__(self, marker):
        super().__init__()
        self.marker = marker

    def process_property(self, configmerger, presetarg, result, obj, remaining_obj_list,
                         property_path, top_level_obj):

        result.setdefault(self.marker, presetarg)


# $import
class PresetImport:
    def _fetch_import(self, remote, cwd):
        u = urlparse(remote)

        if not u.scheme or u.scheme == 'file':
            fname = os.path.join(cwd, u.path)
            logger.debug('$import: opening file %r', fname)
            with open(fname, encoding='utf-8') as f:
                data = yaml.safe_load(f)
            if isinstance(data, dict):
                # relative imports in the imported file are relative to it
                data.setdefault('$_cwd', os.path.dirname(fname))
            return data

        if u.scheme == 'pkg':
            # pkg:module/attr, or pkg:module for the module's
            # `counterstyle_default_config`; callables are called
            modname, *modargs = u.path.split('/')
            try:
                mod = importlib.import_module(modname)
            except ImportError as e:
                raise ValueError(
                    f"Invalid $import target ‘{remote}’: cannot import ‘{modname}’ ({e})"
                ) from e
            if len(modargs) == 0:
                modargs = [ 'counterstyle_default_config' ]
            obj = mod
            for part in modargs:
                if not hasattr(obj, part):
                    raise ValueError(
                        f"Invalid $import target ‘{remote}’: ‘{modname}’ does not "
                        f"provide ‘{'.'.join(modargs)}’"
                    )
                obj = getattr(obj, part)
            if callable(obj):
                obj = obj()
            return obj

        with urlopen(remote) as response:
            # this should also work for JSON, since YAML 1.2 is a superset of JSON
            return yaml.safe_load( response.read() )

    def process_property(self, configmerger, presetarg, result, obj, remaining_obj_list,
                         property_path, top_level_obj):
        import_targets = presetarg
        if isinstance(import_targets, str):
            import_targets = [ import_targets ]
        for import_target in import_targets:
            target_data = self._fetch_import(import_target, top_level_obj.get('$_cwd', '.'))
            if not isinstance(target_data, Mapping):
                raise ValueError(
                    f"$import target ‘{import_target}’ does not contain a mapping"
                )
            # the importing object takes precedence over the imported data
            result.update(configmerger.recursive_assign_defaults_dict(
                [ result, obj, target_data ] + remaining_obj_list,
                property_path,
                top_level_obj=(target_data if '$_cwd' in target_data else top_level_obj)
            ))
            logger.debug(f"processed property $import ‘{import_target}’ -> {result=}")


def get_default_presets():
    return {
        '$import': PresetImport(),

        # simple internal marker for the current object file's CWD
        '$_cwd': PresetKeepMarker('$_cwd'),
    }



def _get_preset_keyvals(d):
    if not isinstance(d, Mapping):
        return []
    return [(k,v) for (k,v) in d.items() if isinstance(k,str) and k.startswith('$')]


class ConfigMerger:
    r"""
    Merge a list of configuration objects, where earlier objects take
    precedence over later ones.

    Mappings are merged recursively.  Scalars and lists are taken from the
    first object that defines them.  Keys starting with ``$`` are presets that
    are processed while merging (e.g. ``$import: other-file.yaml``).
    """
    def __init__(self, presets=None):
        if presets is not None:
            self.presets = dict(presets)
        else:
            self.presets = get_default_presets()

    def recursive_assign_defaults(self, obj_list):
        return self.recursive_assign_defaults_dict(obj_list, [])

    def recursive_assign_defaults_dict(self, obj_list, property_path, *, top_level_obj=None):

        if len(obj_list) == 0:
            return {}

        result = {}

        for j, obj in enumerate(obj_list):
            remaining_obj_list = obj_list[j+1:]

            if obj is None:
                continue

            if not isinstance(obj, Mapping):
                logger.warning(
                    "Incompatible config merge, ignoring value %r for ‘%s’ in chain %r",
                    obj, ".".join(property_path), obj_list
                )
                continue

            if top_level_obj is None:
                this_top_level_obj = obj
            else:
                this_top_level_obj = top_level_obj

            preset_keyvals = _get_preset_keyvals(obj)
            if preset_keyvals:
                # don't modify the caller's object
                presetnames = set([ k for (k, _) in preset_keyvals ])
                obj = { k: v for (k, v) in obj.items() if k not in presetnames }

            # process any "meta"/preset keys
            for presetname, presetarg in preset_keyvals:
                if presetname not in self.presets:
                    raise ValueError(
                        f"Unknown configuration preset ‘{presetname}’ in "
                        f"‘{'.'.join(property_path) or '<top level>'}’"
                    )
                self.presets[presetname].process_property(
                    self, presetarg, result, obj, remaining_obj_list,
                    property_path,
                    top_level_obj=this_top_level_obj
                )

            for k in obj:

                if k in result:
                    # nothing to copy, value is already in result
                    continue

                if isinstance(obj[k], Mapping):
                    # recurse into sub-properties

                    sub_result = self.recursive_assign_defaults_dict(
                        [obj[k]] + [
                            (o.get(k,{}) if isinstance(o,Mapping) else {})
                            for o in remaining_obj_list
                        ],
                        property_path + [k],
                        top_level_obj=this_top_level_obj
                    )

                    result[k] = sub_result

                else:
                    # simply copy the scalar or list value.
                    result[k] = obj[k]

        return result
