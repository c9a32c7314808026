"""Build Datastar action expressions and render them as JavaScript attribute text."""

# Actions
from dstar.actions import HttpMethod as HttpMethod
from dstar.actions import action as action
from dstar.actions import request as request
from dstar.actions import get as get
from dstar.actions import put as put
from dstar.actions import post as post
from dstar.actions import delete as delete
from dstar.actions import patch as patch
from dstar.actions import get_with_options as get_with_options
from dstar.actions import put_with_options as put_with_options
from dstar.actions import post_with_options as post_with_options
from dstar.actions import delete_with_options as delete_with_options
from dstar.actions import patch_with_options as patch_with_options
from dstar.actions import peek as peek
from dstar.actions import set_all as set_all
from dstar.actions import toggle_all as toggle_all
from dstar.actions import clipboard as clipboard
from dstar.actions import clipboard_base64 as clipboard_base64
from dstar.actions import fit as fit
from dstar.actions import fit_clamped as fit_clamped
from dstar.actions import fit_rounded as fit_rounded
from dstar.actions import fit_clamped_rounded as fit_clamped_rounded

# Attributes
from dstar.attrs import AttrBuilder as AttrBuilder
from dstar.attrs import AttrFunc as AttrFunc
from dstar.attrs import AttrMutator as AttrMutator
from dstar.attrs import Attribute as Attribute
from dstar.attrs import append_name as append_name
from dstar.attrs import build_attr as build_attr
from dstar.attrs import effect as effect
from dstar.attrs import expr_attr as expr_attr
from dstar.attrs import on as on
from dstar.attrs import on_change as on_change
from dstar.attrs import on_click as on_click
from dstar.attrs import on_input as on_input
from dstar.attrs import on_load as on_load
from dstar.attrs import on_submit as on_submit
from dstar.attrs import prevent_default as prevent_default
from dstar.attrs import stop_propagation as stop_propagation

# Built-in references
from dstar.builtins import CONSOLE as CONSOLE
from dstar.builtins import DATE as DATE
from dstar.builtins import DOCUMENT as DOCUMENT
from dstar.builtins import EVENT as EVENT
from dstar.builtins import HISTORY as HISTORY
from dstar.builtins import JSON as JSON
from dstar.builtins import LOCAL_STORAGE as LOCAL_STORAGE
from dstar.builtins import LOCATION as LOCATION
from dstar.builtins import MATH as MATH
from dstar.builtins import NAVIGATOR as NAVIGATOR
from dstar.builtins import PROMISE as PROMISE
from dstar.builtins import SESSION_STORAGE as SESSION_STORAGE
from dstar.builtins import THIS as THIS
from dstar.builtins import WINDOW as WINDOW
from dstar.builtins import console_error as console_error
from dstar.builtins import console_log_expr as console_log_expr
from dstar.builtins import console_warn as console_warn
from dstar.builtins import event_target as event_target
from dstar.builtins import event_value as event_value
from dstar.builtins import get_element_by_id as get_element_by_id
from dstar.builtins import method as method
from dstar.builtins import query_selector as query_selector

# Promise chains
from dstar.chains import Catch as Catch
from dstar.chains import PromiseChain as PromiseChain
from dstar.chains import Then as Then
from dstar.chains import catch_chain as catch_chain
from dstar.chains import on_failure as on_failure
from dstar.chains import on_success as on_success
from dstar.chains import then_chain as then_chain
from dstar.chains import with_chains as with_chains

# Combinators
from dstar.combinators import and_ as and_
from dstar.combinators import and_mutator as and_mutator
from dstar.combinators import console_log as console_log
from dstar.combinators import navigate as navigate
from dstar.combinators import set_signal as set_signal

# Configuration
from dstar.env import ENV_DSTAR_ENV as ENV_DSTAR_ENV
from dstar.env import ENV_DSTAR_HTML_SAFE as ENV_DSTAR_HTML_SAFE
from dstar.env import DstarEnv as DstarEnv
from dstar.env import EnvVars as EnvVars
from dstar.env import env as env

# Errors
from dstar.errors import DstarError as DstarError
from dstar.errors import EncodingError as EncodingError

# Nodes
from dstar.nodes import UNDEFINED as UNDEFINED
from dstar.nodes import Array as Array
from dstar.nodes import Arrow as Arrow
from dstar.nodes import Assign as Assign
from dstar.nodes import Binary as Binary
from dstar.nodes import Call as Call
from dstar.nodes import Comma as Comma
from dstar.nodes import Expr as Expr
from dstar.nodes import ExprStmt as ExprStmt
from dstar.nodes import Group as Group
from dstar.nodes import Identifier as Identifier
from dstar.nodes import Literal as Literal
from dstar.nodes import Member as Member
from dstar.nodes import New as New
from dstar.nodes import Node as Node
from dstar.nodes import Object as Object
from dstar.nodes import OptionalCall as OptionalCall
from dstar.nodes import OptionalMember as OptionalMember
from dstar.nodes import Primitive as Primitive
from dstar.nodes import Raw as Raw
from dstar.nodes import Regex as Regex
from dstar.nodes import Return as Return
from dstar.nodes import Spread as Spread
from dstar.nodes import Stmt as Stmt
from dstar.nodes import Subscript as Subscript
from dstar.nodes import Template as Template
from dstar.nodes import Ternary as Ternary
from dstar.nodes import Unary as Unary
from dstar.nodes import Undefined as Undefined
from dstar.nodes import Update as Update
from dstar.nodes import VarDecl as VarDecl
from dstar.nodes import emit as emit
from dstar.nodes import escape_string as escape_string
from dstar.nodes import format_number as format_number
from dstar.nodes import html_safe as html_safe

# Request options
from dstar.options import CancellationMode as CancellationMode
from dstar.options import ContentType as ContentType
from dstar.options import FilterOptions as FilterOptions
from dstar.options import RequestOption as RequestOption
from dstar.options import RequestOptions as RequestOptions
from dstar.options import RetryMode as RetryMode

# Values
from dstar.values import ExprMutator as ExprMutator
from dstar.values import Value as Value
from dstar.values import encode_json as encode_json
from dstar.values import json_expr as json_expr
from dstar.values import json_value as json_value
from dstar.values import mutator as mutator
from dstar.values import raw as raw
from dstar.values import signal_ref as signal_ref
from dstar.values import to_expr as to_expr
from dstar.values import wrap as wrap
