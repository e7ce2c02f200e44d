from . import run_with_args

run_with_args()
