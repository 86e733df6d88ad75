from rest_framework import serializers


class EventSummarySerializer(serializers.Serializer):
    event_id = serializers.CharField(source="event.id")
    title = serializers.CharField(source="event.title")
    confirmed_male = serializers.IntegerField()
    confirmed_female = serializers.IntegerField()
    capacity_male = serializers.IntegerField()
    capacity_female = serializers.IntegerField()
    total_confirmed = serializers.IntegerField()
    total_applications = serializers.IntegerField()


class ReviewStatsSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    average = serializers.FloatField()
    histogram = serializers.SerializerMethodField()

    def get_histogram(self, stats) -> dict:
        return {str(star): count for star, count in stats.histogram.items()}
