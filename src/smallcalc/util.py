from functools import wraps


class CalcError(Exception):
    '''
    Base of every error raised while evaluating an expression.

    :param message: Human readable description.
    :param column: 1-based column the error points at, if any.
    '''
    def __init__(self, message, column=None):
        super().__init__(message)
        self.message = message
        self.column = column

    def __str__(self):
        return self.message


class ExpressionSyntaxError(CalcError):
    pass


class LengthExceeded(CalcError):
    pass


class TokenTooLong(LengthExceeded, ExpressionSyntaxError):
    pass


def wrap_user_errors(fmt, locate=None):
    '''
    Decorator that converts stray exceptions to ExpressionSyntaxErrors.

    Passes through CalcErrors. fmt is formatted with the wrapped call's
    arguments. locate, when given, is called with them too and returns
    the column the error points at.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except CalcError:
                raise
            except Exception as e:
                where = None
                if locate is not None:
                    where = locate(*args, **kwargs)
                raise ExpressionSyntaxError(fmt.format(*args, **kwargs),
                                            where) from e
        return wrapper
    return decorator
