# mlsamples/config/tutorial_config.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TutorialConfig(BaseModel):
    """
    Shared base: `model_*` field names are ours, not pydantic's.
    """

    model_config = ConfigDict(protected_namespaces=())

    trainer: str = ""
    seed: Optional[int] = None


class TextFileConfig(TutorialConfig):
    has_header: bool = True
    separator: str = ","


class HelloMLConfig(TutorialConfig):
    trainer: str = "sdca_regression"
    feature_columns: List[str] = Field(default_factory=lambda: ["size"])
    label_column: str = "price"
    max_iterations: int = 100


class SentimentConfig(TextFileConfig):
    data_file: str = "Data/yelp_labelled.txt"
    has_header: bool = False
    separator: str = "\t"
    test_fraction: float = 0.2

    trainer: str = "sdca_logistic_regression"
    text_column: str = "sentiment_text"
    label_column: str = "label"
    max_iterations: int = 1000

    model_dir: str = "Models/sentiment"
    model_version: str = "v1"


class IssueClassificationConfig(TextFileConfig):
    train_file: str = "Data/issues_train.tsv"
    test_file: str = "Data/issues_test.tsv"
    separator: str = "\t"
    seed: Optional[int] = 0

    trainer: str = "sdca_maximum_entropy"
    text_columns: List[str] = Field(default_factory=lambda: ["title", "description"])
    label_column: str = "area"
    max_iterations: int = 100

    model_dir: str = "Models/issues"
    model_version: str = "v1"


class TaxiFareConfig(TextFileConfig):
    train_file: str = "Data/taxi-fare-train.csv"
    test_file: str = "Data/taxi-fare-test.csv"
    seed: Optional[int] = 0

    trainer: str = "fast_tree"
    label_column: str = "fare_amount"
    categorical_columns: List[str] = Field(
        default_factory=lambda: ["vendor_id", "rate_code", "payment_type"]
    )
    numeric_columns: List[str] = Field(
        default_factory=lambda: ["passenger_count", "trip_time", "trip_distance"]
    )

    # FastTree defaults
    number_of_trees: int = 100
    number_of_leaves: int = 20
    learning_rate: float = 0.2
    minimum_example_count_per_leaf: int = 10


class IrisClusteringConfig(TextFileConfig):
    data_file: str = "Data/iris.data"
    has_header: bool = False
    seed: Optional[int] = 0

    trainer: str = "kmeans"
    feature_columns: List[str] = Field(
        default_factory=lambda: [
            "sepal_length",
            "sepal_width",
            "petal_length",
            "petal_width",
        ]
    )
    number_of_clusters: int = 3

    model_dir: str = "Data/iris_model"
    model_version: str = "v1"


class MovieRecommendationConfig(TextFileConfig):
    train_file: str = "Data/recommendation-ratings-train.csv"
    test_file: str = "Data/recommendation-ratings-test.csv"

    trainer: str = "matrix_factorization"
    user_column: str = "user_id"
    item_column: str = "movie_id"
    label_column: str = "label"
    number_of_iterations: int = 20
    approximation_rank: int = 100

    recommendation_threshold: float = 3.5

    model_dir: str = "Data/movie_model"
    model_version: str = "v1"


class SalesAnomalyConfig(TextFileConfig):
    data_file: str = "Data/product-sales.csv"

    # number of rows in the dataset; both windows are a quarter of it
    doc_size: int = 36
    confidence: float = 95.0
    martingale_epsilon: float = 0.1

    chart_file: Optional[str] = None

    @property
    def pvalue_history_length(self) -> int:
        return self.doc_size // 4

    @property
    def change_history_length(self) -> int:
        return self.doc_size // 4


class ObjectDetectionConfig(TutorialConfig):
    model_file: str = "assets/tiny_yolov2/Model.onnx"
    images_dir: str = "assets/images"
    output_dir: str = "assets/images/output"

    image_width: int = 416
    image_height: int = 416
    model_input: str = "image"
    model_output: str = "grid"

    confidence_threshold: float = 0.3
    iou_threshold: float = 0.5
    max_boxes: int = 5


class TransferLearningConfig(TutorialConfig):
    train_tags: str = "Data/assets/inputs-train/data/tags.tsv"
    train_images_dir: str = "Data/assets/inputs-train/data"
    predict_image_list: str = "Data/assets/inputs-predict/data/image_list.tsv"
    predict_images_dir: str = "Data/assets/inputs-predict/data"
    predict_single_image: str = "Data/assets/inputs-predict-single/data/toaster3.jpg"

    inception_model: str = "Data/tensorflow_inception_graph.onnx"
    model_input: str = "input"
    model_output: str = "softmax2_pre_activation"
    image_width: int = 224
    image_height: int = 224
    mean: float = 117.0
    scale: float = 1.0
    channels_last: bool = True

    trainer: str = "lbfgs_maximum_entropy"
    label_column: str = "label"
    max_iterations: int = 100

    model_dir: str = "Data/assets/outputs/imageClassifier"
    model_version: str = "v1"


class GameMatchConfig(TutorialConfig):
    # skill ~ N(prior_mean, prior_variance); performance ~ N(skill, performance_variance)
    prior_mean: float = 6.0
    prior_variance: float = Field(default=9.0, gt=0)
    performance_variance: float = Field(default=1.0, gt=0)


class TutorialsConfig(BaseModel):
    hello_ml: HelloMLConfig = Field(default_factory=HelloMLConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    issues: IssueClassificationConfig = Field(default_factory=IssueClassificationConfig)
    taxi_fare: TaxiFareConfig = Field(default_factory=TaxiFareConfig)
    iris: IrisClusteringConfig = Field(default_factory=IrisClusteringConfig)
    movies: MovieRecommendationConfig = Field(default_factory=MovieRecommendationConfig)
    sales_anomaly: SalesAnomalyConfig = Field(default_factory=SalesAnomalyConfig)
    object_detection: ObjectDetectionConfig = Field(default_factory=ObjectDetectionConfig)
    transfer_learning: TransferLearningConfig = Field(default_factory=TransferLearningConfig)
    game_match: GameMatchConfig = Field(default_factory=GameMatchConfig)
