from rest_framework import serializers


class ScopeSerializer(serializers.Serializer):
    """
    Validate the optional tenant scope of a request.

    Query Parameters / Body:
        classroom (UUID): Classroom the operation is restricted to
    """

    classroom = serializers.UUIDField(required=False, allow_null=True)


def get_classroom_id(request):
    """
    Return the validated classroom id of a request, or None.

    Read requests carry the scope as a query parameter, write requests in
    the body (falling back to the query string).
    """
    source = request.query_params
    if request.method not in ('GET', 'HEAD', 'OPTIONS') and 'classroom' in request.data:
        source = request.data
    serializer = ScopeSerializer(data={'classroom': source.get('classroom') or None})
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data.get('classroom')


# Route pattern for UUID primary keys in router lookups
UUID_PATTERN = '[0-9a-fA-F-]{32,36}'

# Range of an IntegerField column on every supported database
INTEGER_MIN = -2 ** 31
INTEGER_MAX = 2 ** 31 - 1
