import os.path
from os import path

from dotenv import load_dotenv
from pyaml_env import parse_config


class Config():

    app_path = path.abspath(path.dirname(__file__))
    conf_path = os.path.join(app_path, "conf.yml")
    env_path = os.path.join(os.getcwd(), ".env")

    @staticmethod
    def get():
        if os.path.exists(Config.env_path):
            load_dotenv(Config.env_path)

        return parse_config(Config.conf_path)

    @staticmethod
    def use(env_file=None, config_file=None):
        if env_file is not None: Config.env_path = env_file
        if config_file is not None: Config.conf_path = config_file


def wrangler_command():
    return Config.get()["wrangler"]["command"]


def sqlite_command():
    return Config.get()["sqlite"]["command"]


def statement_preview():
    return int(Config.get()["sqlite"]["statement_preview"])


def minimum_free_space():
    return Config.get()["disk"]["minimum_free"]
