#!/usr/bin/env python
import importlib
import logging
from importlib import resources
from types import ModuleType
from typing import Dict, Iterable, List, Optional

import orjson as json

import structkit.config.types as tp
from structkit.core.baseline import grid_generator
from structkit.core.flyweightfactory import CacheRegistry
from structkit.core.loggerfactory import LoggerFactory


class PlaygroundConfigError(Exception):
    pass


class Playground:
    """Owns the registries shared by every demo in one run."""

    def __init__(self, json_config_file_path: str) -> None:
        logger_cfg, baseline_cfg, registry_cfg, demos_cfg = self.load_config(
            json_config_file_path
        )
        logging.basicConfig(
            filename=logger_cfg.file_path or None,
            filemode="w",
            format="%(asctime)s -%(levelname)s- %(name)s %(filename)s:%(lineno)d %(message)s",
            level=logger_cfg.verbosity,
        )
        self.baseline_cfg = baseline_cfg
        self.registry = CacheRegistry(
            grid_generator(baseline_cfg.columns, baseline_cfg.rows),
            share_baseline=registry_cfg.share_baseline,
        )
        self.loggers = LoggerFactory()
        self.demo_register: Dict[str, ModuleType] = {}
        self.init_demos(demos_cfg)

    def load_config(
        self, json_config_file_path: str
    ) -> tuple[tp.LoggerConfig, tp.BaselineConfig, tp.RegistryConfig, tp.DemosConfig]:
        try:
            if not json_config_file_path:
                logging.info("No config path provided, loading default from resources.")
                config_resource = resources.files("structkit.config").joinpath(
                    "config-default.json"
                )
                json_config = json.loads(config_resource.read_bytes())
            else:
                with open(json_config_file_path, "rb") as f:
                    json_config = json.loads(f.read())

            return tp.parse_config(json_config)

        except FileNotFoundError as e:
            logging.error("Configuration file not found: %s", e)
            raise PlaygroundConfigError(str(e)) from e
        except Exception as e:
            logging.error("Failed to load config: %s", e)
            raise PlaygroundConfigError(str(e)) from e

    def init_demos(self, demos_cfg: tp.DemosConfig) -> None:
        for name, module_path in demos_cfg.modules.items():
            try:
                module = importlib.import_module(module_path)
            except ImportError as e:
                logging.error("failed to import demo %s from %s", name, module_path)
                raise ValueError(f"Failed to import demo {name}: {e}") from e
            if not callable(getattr(module, "run", None)):
                logging.error("demo module %s has no run()", module_path)
                raise ValueError(f"Demo {name} does not define run()")
            self.demo_register[name] = module
        logging.debug("registered demos: %s", list(self.demo_register.keys()))

    def run(self, names: Optional[Iterable[str]] = None) -> Dict[str, List[str]]:
        selected = list(names) if names else list(self.demo_register.keys())
        unknown = [name for name in selected if name not in self.demo_register]
        if unknown:
            raise ValueError(f"Unknown demo(s): {', '.join(unknown)}")

        results: Dict[str, List[str]] = {}
        for name in selected:
            logging.info("running demo %s", name)
            results[name] = list(self.demo_register[name].run(self))
        return results
