# json_any_key/application/__init__.py

"""Application layer: encoding and decoding of keyed collections"""
