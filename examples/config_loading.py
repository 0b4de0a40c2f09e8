"""config_loading.py"""
import sys

from olive.config import loader

cli = loader("olive.yaml")

if __name__ == "__main__":
    print(cli.parse(sys.argv[1:]).to_dict())
