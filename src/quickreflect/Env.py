#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os


class Env:
    """Runtime environment - configuration lookup for quickreflect."""

    _instance = None

    # Environment variable prefix for config keys
    PREFIX = "QUICKREFLECT_"

    def __init__(self, vars=None):
        self._vars = dict(os.environ if vars is None else vars)

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    @staticmethod
    def reset(vars=None):
        """Replace the current environment (tests use this to inject config)."""
        Env._instance = Env(vars)
        return Env._instance

    def vars(self):
        """Return a copy of the environment variables this Env reads from."""
        return dict(self._vars)

    def config(self, key, def_val=None):
        """Get configuration value.

        The key 'max.threads' is read from QUICKREFLECT_MAX_THREADS.

        Args:
            key: Config key
            def_val: Default value if not found

        Returns:
            Config value (str) or default
        """
        env_key = self.PREFIX + key.upper().replace(".", "_")
        val = self._vars.get(env_key)
        if val is not None and val != "":
            return val
        return def_val

    def config_int(self, key, def_val):
        """Get integer configuration value, ignoring values that don't parse."""
        val = self.config(key)
        if val is None:
            return def_val
        try:
            return int(val)
        except ValueError:
            return def_val
