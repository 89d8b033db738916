# -*- coding: utf-8 -*-
# Generated by the protocol buffer compiler.  DO NOT EDIT!
# source: catalog_facade/protos/product.proto
"""Generated protocol buffer code."""
from google.protobuf.internal import builder as _builder
from google.protobuf import descriptor as _descriptor
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
# @@protoc_insertion_point(imports)

_sym_db = _symbol_database.Default()




DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(b'\n#catalog_facade/protos/product.proto\x12\x07product\"\x07\n\x05\x45mpty\"\x1c\n\x0eProductRequest\x12\n\n\x02id\x18\x01 \x01(\x05\"O\n\x0fProductResponse\x12\n\n\x02id\x18\x01 \x01(\x05\x12\x0c\n\x04name\x18\x02 \x01(\t\x12\r\n\x05price\x18\x03 \x01(\x01\x12\x13\n\x0b\x64\x65scription\x18\x04 \x01(\t\"A\n\x13ProductListResponse\x12*\n\x08products\x18\x01 \x03(\x0b\x32\x18.product.ProductResponse2\x87\x01\n\x07Product\x12?\n\nGetProduct\x12\x17.product.ProductRequest\x1a\x18.product.ProductResponse\x12;\n\x0bGetProducts\x12\x0e.product.Empty\x1a\x1c.product.ProductListResponseb\x06proto3')

_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, globals())
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'catalog_facade.protos.product_pb2', globals())
if _descriptor._USE_C_DESCRIPTORS == False:

  DESCRIPTOR._options = None
  _EMPTY._serialized_start=48
  _EMPTY._serialized_end=55
  _PRODUCTREQUEST._serialized_start=57
  _PRODUCTREQUEST._serialized_end=85
  _PRODUCTRESPONSE._serialized_start=87
  _PRODUCTRESPONSE._serialized_end=166
  _PRODUCTLISTRESPONSE._serialized_start=168
  _PRODUCTLISTRESPONSE._serialized_end=233
  _PRODUCT._serialized_start=236
  _PRODUCT._serialized_end=371
# @@protoc_insertion_point(module_scope)
