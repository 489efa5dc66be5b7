from steplog import behave_hooks


def before_scenario(context, scenario):
    behave_hooks.before_scenario(context, scenario)


def after_scenario(context, scenario):
    behave_hooks.after_scenario(context, scenario)
