"""Segmentation and rendering of assistant replies into typed display units.

Submodules:
  patterns  -- delimiter and prefix constants
  schema    -- Block, TableModel, Span and rendered-unit Pydantic models
  segment   -- split a document into contiguous text / table blocks
  tables    -- pipe-table parsing (separator filtering, cell splitting)
  inline    -- $math$ / **emphasis** lexer and span reducer
  render    -- per-line classification and the full render pass
"""
